import logging

from django.contrib.auth.models import update_last_login
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from .serializers import LoginSerializer, LogoutSerializer, TokenSerializer, UserSerializer

logger = logging.getLogger(__name__)


@extend_schema(request=LoginSerializer, responses={200: TokenSerializer})
@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """Log in and obtain JWT tokens"""
    serializer = LoginSerializer(data=request.data)
    if serializer.is_valid():
        user = serializer.validated_data['user']
        refresh = RefreshToken.for_user(user)
        update_last_login(None, user)
        logger.info("User %s logged in", user.username)

        return Response({
            'access': str(refresh.access_token),
            'refresh': str(refresh),
            'user': UserSerializer(user).data
        })
    logger.warning("Failed login for %r", request.data.get('username') if hasattr(request.data, 'get') else None)
    return Response(serializer.errors, status=status.HTTP_401_UNAUTHORIZED)


@extend_schema(request=LogoutSerializer, responses={200: None})
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    """Log out by blacklisting the refresh token"""
    serializer = LogoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    try:
        RefreshToken(serializer.validated_data['refresh']).blacklist()
    except TokenError:
        return Response({'error': 'Invalid token'}, status=status.HTTP_400_BAD_REQUEST)
    return Response({'message': 'Logged out successfully'})


@extend_schema(responses=UserSerializer)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def profile_view(request):
    """Current user's profile"""
    return Response(UserSerializer(request.user).data)
