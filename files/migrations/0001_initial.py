from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CustomTab',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role_group', models.CharField(max_length=20)),
                ('tab_name', models.CharField(max_length=100)),
                ('tab_key', models.CharField(max_length=100)),
                ('display_order', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['display_order', 'tab_key'],
                'constraints': [models.UniqueConstraint(fields=('role_group', 'tab_key'), name='unique_tab_per_role_group')],
            },
        ),
        migrations.CreateModel(
            name='File',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('filename', models.CharField(max_length=255)),
                ('original_name', models.CharField(max_length=255)),
                ('file_type', models.CharField(blank=True, default='application/octet-stream', max_length=255)),
                ('file_size', models.BigIntegerField(default=0)),
                ('category', models.CharField(max_length=100)),
                ('role_group', models.CharField(max_length=20)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='pending', max_length=20)),
                ('shared_with', models.CharField(default='all', max_length=20)),
                ('uploaded_by', models.CharField(max_length=150)),
                ('folder_path', models.CharField(blank=True, default='', max_length=1024)),
                ('upload_date', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['-upload_date', '-id'],
                'indexes': [
                    models.Index(fields=['role_group', 'category', 'folder_path'], name='files_file_scope_idx'),
                    models.Index(fields=['uploaded_by'], name='files_file_uploader_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Folder',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('path', models.CharField(max_length=1024)),
                ('category', models.CharField(max_length=100)),
                ('role_group', models.CharField(max_length=20)),
                ('parent_path', models.CharField(blank=True, default='', max_length=1024)),
                ('created_by', models.CharField(max_length=150)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='files.folder')),
            ],
            options={
                'ordering': ['category', 'path'],
                'indexes': [models.Index(fields=['role_group', 'category', 'parent_path'], name='files_folder_scope_idx')],
                'constraints': [models.UniqueConstraint(fields=('path', 'category', 'role_group'), name='unique_folder_path')],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('content', models.TextField()),
                ('author', models.CharField(max_length=150)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('file', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='files.file')),
            ],
            options={
                'ordering': ['created_at', 'id'],
            },
        ),
    ]
