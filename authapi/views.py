import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import AccessToken

from core.exceptions import Conflict
from users.models import User
from users.serializers import UserSerializer
from .serializers import SigninSerializer, SignupSerializer

logger = logging.getLogger(__name__)


class InvalidCredentials(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


def issue_token(user):
    token = AccessToken.for_user(user)
    token["email"] = user.email
    token["isAdmin"] = user.is_admin
    return str(token)


def _auth_payload(user):
    return {"user": UserSerializer(user).data, "token": issue_token(user)}


class SignupView(APIView):
    # A stale bearer header must not block signing up or in.
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]

        if User.objects.filter(email=email).exists():
            raise Conflict("User already exists")

        user = User.objects.create_user(email=email, password=serializer.validated_data["password"])
        logger.info("New user signed up: %s", user.pk)
        return Response(_auth_payload(user), status=status.HTTP_201_CREATED)


class SigninView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = SigninSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            raise InvalidCredentials()
        return Response(_auth_payload(user))


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


class AuthApiIndexView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(
            {
                "detail": "Auth API root",
                "endpoints": {
                    "signup": "/api/auth/signup",
                    "signin": "/api/auth/signin",
                    "me": "/api/auth/me",
                },
            }
        )
