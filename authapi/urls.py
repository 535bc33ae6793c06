from django.urls import path
from .views import AuthApiIndexView, SignupView, SigninView, MeView

urlpatterns = [
    path("", AuthApiIndexView.as_view()),
    path("/signup", SignupView.as_view()),
    path("/signin", SigninView.as_view()),
    path("/me", MeView.as_view()),
]
