from django.urls import path
from .views import LoginView, RegistrationView

urlpatterns = [
    path("users/register/", RegistrationView.as_view(), name="registration"),
    path("users/login/", LoginView.as_view(), name="login"),
]
