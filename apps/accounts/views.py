"""
Authentication endpoints.

Members sign in with email and password and receive a JWT pair. Every
other API endpoint expects the access token in the Authorization header.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .serializers import (
    RegistrationInputSerializer,
    LoginInputSerializer,
    LogoutInputSerializer,
    UserSerializer,
    ProfileSerializer,
    AuthResponseSerializer,
    MessageSerializer,
    ErrorSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)


def _auth_response(user, message, status_code=status.HTTP_200_OK):
    """Profile and a fresh token pair for a member who just signed in."""
    refresh = RefreshToken.for_user(user)
    return Response({
        'message': message,
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        },
    }, status=status_code)


def _error(message, status_code):
    return Response({'error': message}, status=status_code)


@extend_schema(
    request=RegistrationInputSerializer,
    responses={201: AuthResponseSerializer, 400: ErrorSerializer},
    description="Create a household member account and sign in.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    serializer = RegistrationInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_user(**serializer.validated_data)
    except UserRegistrationError as e:
        return _error(str(e), status.HTTP_400_BAD_REQUEST)

    return _auth_response(user, 'Registration successful', status.HTTP_201_CREATED)


@extend_schema(
    request=LoginInputSerializer,
    responses={
        200: AuthResponseSerializer,
        401: ErrorSerializer,
        403: ErrorSerializer,
    },
    description="Exchange email and password for a JWT pair.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = LoginInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError:
        return _error('Invalid credentials', status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return _error(str(e), status.HTTP_403_FORBIDDEN)

    return _auth_response(user, 'Login successful')


@extend_schema(
    request=LogoutInputSerializer,
    responses={200: MessageSerializer, 400: ErrorSerializer},
    description="Sign out. A refresh token, when sent, must be one this server issued.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    serializer = LogoutInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    refresh = serializer.validated_data.get('refresh')
    if refresh:
        try:
            RefreshToken(refresh)
        except TokenError:
            return _error('Invalid token', status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Logout successful'})


@extend_schema(
    responses={200: ProfileSerializer},
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Profile of the signed-in member."""
    return Response(ProfileSerializer(request.user).data)


@extend_schema(
    request=UserSerializer,
    responses={200: ProfileSerializer},
    description="Change the display name. Email cannot be changed.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    serializer = UserSerializer(request.user, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(ProfileSerializer(request.user).data)
