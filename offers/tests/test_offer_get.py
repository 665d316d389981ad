# offers/tests/test_offer_get.py
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from comments.models import Comment
from favorites.models import Favorite
from offers.models import Offer

User = get_user_model()


def make_user(email, type="regular"):
    u = User.objects.create_user(email=email, password="pass1234", name=email.split("@")[0], type=type)
    tok = Token.objects.create(user=u)
    return u, tok


def add_offer(author, name="Website Design Loft", city="Paris", is_premium=False, price=1000, age_days=0):
    offer = Offer.objects.create(author=author, name=name, city=city, is_premium=is_premium, price=price)
    if age_days:
        Offer.objects.filter(pk=offer.pk).update(created_at=timezone.now() - timedelta(days=age_days))
    return offer


class OfferListTests(APITestCase):
    def setUp(self):
        self.url = reverse("offer-list")
        self.host, self.host_tok = make_user("host@example.com", "pro")
        self.guest, self.guest_tok = make_user("guest@example.com")

        self.offer_a = add_offer(self.host, name="Canal house Amsterdam", city="Amsterdam", age_days=1)
        self.offer_b = add_offer(self.host, name="Loft near Notre Dame", price=2500)

    def auth(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

    def test_list_offers_200_no_auth_required(self):
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 2)
        first = res.data[0]
        for key in ("id", "name", "city", "isPremium", "price", "createdAt", "author", "commentsCount",
                    "rating", "isFavorite"):
            self.assertIn(key, first)
        self.assertEqual(first["id"], self.offer_b.id)
        self.assertEqual(first["author"]["email"], "host@example.com")
        self.assertNotIn("password", first["author"])

    def test_rating_and_favorite_fields(self):
        for r in (4, 5, 5):
            Comment.objects.create(offer=self.offer_a, author=self.guest, rating=r, text="great stay")
        Favorite.objects.create(user=self.guest, offer=self.offer_a)

        self.auth(self.guest_tok)
        res = self.client.get(self.url)
        by_id = {o["id"]: o for o in res.data}
        self.assertEqual(by_id[self.offer_a.id]["rating"], 4.7)
        self.assertTrue(by_id[self.offer_a.id]["isFavorite"])
        self.assertIsNone(by_id[self.offer_b.id]["rating"])
        self.assertFalse(by_id[self.offer_b.id]["isFavorite"])

    def test_anonymous_viewer_has_no_favorites(self):
        Favorite.objects.create(user=self.host, offer=self.offer_a)
        res = self.client.get(self.url)
        self.assertTrue(all(o["isFavorite"] is False for o in res.data))

    def test_limit_param(self):
        res = self.client.get(self.url, {"limit": 1})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 1)

    def test_sort_param(self):
        res = self.client.get(self.url, {"sort": "price"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        prices = [o["price"] for o in res.data]
        self.assertEqual(prices, sorted(prices))

    def test_invalid_params_return_400(self):
        r1 = self.client.get(self.url, {"limit": "-1"})
        r2 = self.client.get(self.url, {"limit": "abc"})
        r3 = self.client.get(self.url, {"sort": "offerCount"})
        self.assertEqual(r1.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(r2.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(r3.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("limit", r1.data)
        self.assertIn("sort", r3.data)


class PremiumOfferListTests(APITestCase):
    def setUp(self):
        self.url = reverse("offer-premium")
        self.host, _ = make_user("host@example.com", "pro")
        self.old = add_offer(self.host, name="Premium old Paris", is_premium=True, age_days=2)
        self.new = add_offer(self.host, name="Premium new Paris", is_premium=True)
        add_offer(self.host, name="Plain flat in Paris")
        add_offer(self.host, name="Premium in Cologne", city="Cologne", is_premium=True)

    def test_premium_of_city_newest_first(self):
        res = self.client.get(self.url, {"city": "Paris"})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([o["id"] for o in res.data], [self.new.id, self.old.id])
        self.assertTrue(all(o["isPremium"] and o["city"] == "Paris" for o in res.data))

    def test_count_param(self):
        res = self.client.get(self.url, {"city": "Paris", "count": 1})
        self.assertEqual([o["id"] for o in res.data], [self.new.id])

    def test_missing_or_unknown_city_400(self):
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_400_BAD_REQUEST)
        res = self.client.get(self.url, {"city": "Berlin"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("city", res.data)
