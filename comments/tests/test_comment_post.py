from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from comments.models import Comment
from offers.models import Offer

User = get_user_model()


class CommentCreateTests(APITestCase):
    def setUp(self):
        self.host = User.objects.create_user(email="host@example.com", password="pass1234", name="host", type="pro")
        self.guest = User.objects.create_user(email="guest@example.com", password="pass1234", name="guest")
        self.guest_token = Token.objects.create(user=self.guest)

        self.offer = Offer.objects.create(author=self.host, name="Loft in Dusseldorf", city="Dusseldorf", price=750)
        self.url = reverse("offer-comments", args=[self.offer.id])

    def auth(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

    def test_create_comment_success_201(self):
        self.auth(self.guest_token)
        payload = {"text": "Hervorragende Erfahrung!", "rating": 5}
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertIn("id", res.data)
        self.assertEqual(res.data["offerId"], self.offer.id)
        self.assertEqual(res.data["author"]["id"], self.guest.id)
        self.assertEqual(res.data["rating"], 5)
        self.assertEqual(res.data["text"], payload["text"])
        self.assertIn("createdAt", res.data)

        self.offer.refresh_from_db()
        self.assertEqual(self.offer.comments_count, 1)

    def test_unauthenticated_401(self):
        res = self.client.post(self.url, {"text": "Nice place", "rating": 4}, format="json")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_invalid_rating_returns_400(self):
        self.auth(self.guest_token)
        res = self.client.post(self.url, {"text": "too low", "rating": 0}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

        res = self.client.post(self.url, {"text": "too high", "rating": 6}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Comment.objects.count(), 0)

    def test_short_text_returns_400(self):
        self.auth(self.guest_token)
        res = self.client.post(self.url, {"text": "ok", "rating": 3}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("text", res.data)

    def test_unknown_offer_returns_404(self):
        self.auth(self.guest_token)
        res = self.client.post(reverse("offer-comments", args=[999999]), {"text": "Nice place", "rating": 4},
                               format="json")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_payload_author_ignored_server_sets_author(self):
        self.auth(self.guest_token)
        payload = {"text": "Nice place to stay", "rating": 4, "author": self.host.id}
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["author"]["id"], self.guest.id)
