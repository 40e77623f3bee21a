from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='VaultCustomTab',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tab_name', models.CharField(max_length=100)),
                ('tab_key', models.CharField(max_length=100)),
                ('display_order', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('collector', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='vault_tabs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['display_order', 'tab_key'],
                'constraints': [models.UniqueConstraint(fields=('collector', 'tab_key'), name='unique_vault_tab_per_collector')],
            },
        ),
        migrations.CreateModel(
            name='VaultFile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('filename', models.CharField(max_length=255)),
                ('original_name', models.CharField(max_length=255)),
                ('file_type', models.CharField(blank=True, default='application/octet-stream', max_length=255)),
                ('file_size', models.BigIntegerField(default=0)),
                ('category', models.CharField(max_length=100)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='approved', max_length=20)),
                ('folder_path', models.CharField(blank=True, default='', max_length=1024)),
                ('upload_date', models.DateTimeField(auto_now_add=True)),
                ('collector', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='vault_files', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-upload_date', '-id'],
                'indexes': [models.Index(fields=['collector', 'category', 'folder_path'], name='vault_file_scope_idx')],
            },
        ),
        migrations.CreateModel(
            name='VaultFolder',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('path', models.CharField(max_length=1024)),
                ('category', models.CharField(max_length=100)),
                ('parent_path', models.CharField(blank=True, default='', max_length=1024)),
                ('created_by', models.CharField(max_length=150)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('collector', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='vault_folders', to=settings.AUTH_USER_MODEL)),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='vault.vaultfolder')),
            ],
            options={
                'ordering': ['category', 'path'],
                'constraints': [models.UniqueConstraint(fields=('path', 'category', 'collector'), name='unique_vault_folder_path')],
            },
        ),
        migrations.CreateModel(
            name='VaultComment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('content', models.TextField()),
                ('author', models.CharField(max_length=150)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('vault_file', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='vault.vaultfile')),
            ],
            options={
                'ordering': ['created_at', 'id'],
            },
        ),
    ]
