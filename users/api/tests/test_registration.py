from unittest import mock

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient, APITestCase

from users.api.views import RegistrationView

User = get_user_model()


class RegistrationTests(APITestCase):
    def setUp(self):
        self.url = reverse("registration")
        self.client = APIClient()

    def payload(self, **overrides):
        data = {
            "email": "example@mail.de",
            "avatar": "avatar.jpg",
            "name": "Keks",
            "password": "Strong12",
            "type": "regular",
        }
        data.update(overrides)
        return data

    def test_registration_success(self):
        payload = self.payload()
        resp = self.client.post(self.url, payload, format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertIn("id", resp.data)
        self.assertEqual(resp.data["email"], payload["email"])
        self.assertEqual(resp.data["name"], payload["name"])
        self.assertEqual(resp.data["type"], "regular")
        self.assertNotIn("password", resp.data)

        user = User.objects.get(email=payload["email"])
        self.assertNotEqual(user.password, payload["password"])
        self.assertTrue(user.check_password(payload["password"]))

    def test_registration_pro_account(self):
        resp = self.client.post(self.url, self.payload(type="pro"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(User.objects.get().type, User.UserType.PRO)

    def test_duplicate_email_409(self):
        User.objects.create_user(email="dup@mail.de", password="abc12345", name="dup")
        resp = self.client.post(self.url, self.payload(email="dup@mail.de"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(User.objects.filter(email="dup@mail.de").count(), 1)

    def test_duplicate_email_in_other_case_409(self):
        User.objects.create_user(email="dup@mail.de", password="abc12345", name="dup")
        resp = self.client.post(self.url, self.payload(email="Dup@Mail.de"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(User.objects.filter(email__iexact="dup@mail.de").count(), 1)

    def test_duplicate_email_lost_race_409(self):
        User.objects.create_user(email="dup@mail.de", password="abc12345", name="dup")
        with mock.patch.object(RegistrationView.user_service, "find_by_email", return_value=None):
            resp = self.client.post(self.url, self.payload(email="dup@mail.de"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(User.objects.count(), 1)

    def test_invalid_type_400(self):
        resp = self.client.post(self.url, self.payload(type="business"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("type", resp.data)

    def test_invalid_email_and_short_password_400(self):
        resp = self.client.post(self.url, self.payload(email="nope", password="123"), format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("email", resp.data)
        self.assertIn("password", resp.data)

    def test_missing_required_fields_400(self):
        resp = self.client.post(self.url, {"email": "x@mail.de"}, format="json")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        for f in ("name", "password", "type"):
            self.assertIn(f, resp.data)

    def test_authenticated_user_cannot_register_403(self):
        user = User.objects.create_user(email="in@mail.de", password="abc12345", name="in")
        token = Token.objects.create(user=user)
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")
        resp = self.client.post(self.url, self.payload(), format="json")
        self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)
