from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import CustomUser, ROLE_COLLECTOR
from accounts.permissions import CanListCollectors


class CollectorListAPIView(APIView):
    permission_classes = [IsAuthenticated, CanListCollectors]

    def get(self, request):
        collectors = CustomUser.objects.filter(role=ROLE_COLLECTOR).order_by("username").values("id", "username")
        return Response({"collectors": list(collectors)})
