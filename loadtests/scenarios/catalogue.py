"""Catalogue load test scenarios.

A read-heavy browsing journey plus an administrator journey that creates,
updates and retires a product. Steps execute in order; each depends on
the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import product_data, product_update, search_params
from loadtests.helpers.state import AdminState, ShopperState

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"


class BrowseCatalogJourney(SequentialTaskSet):
    """Featured -> Categories -> Filtered listing -> Product detail.

    Anonymous traffic; exercises the query side of the catalogue only.
    """

    def on_start(self):
        self.state = ShopperState()

    @task
    def featured(self):
        with self.client.get("/products/featured", catch_response=True, name="GET /products/featured") as resp:
            if resp.status_code != 200:
                resp.failure(f"Featured products failed: {resp.status_code}")

    @task
    def categories(self):
        with self.client.get("/products/categories", catch_response=True, name="GET /products/categories") as resp:
            if resp.status_code != 200:
                resp.failure(f"Categories failed: {resp.status_code}")

    @task
    def search(self):
        with self.client.get(
            "/products",
            params=search_params(),
            catch_response=True,
            name="GET /products",
        ) as resp:
            if resp.status_code == 200:
                self.state.products = resp.json()["products"]
            else:
                resp.failure(f"Product search failed: {resp.status_code}")
                self.interrupt()

    @task
    def product_detail(self):
        if not self.state.products:
            self.interrupt()
            return
        product_id = random.choice(self.state.products)["_id"]
        with self.client.get(
            f"/products/{product_id}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Product detail failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class AdminProductJourney(SequentialTaskSet):
    """Login as admin -> Create product -> Update price and stock -> Deactivate.

    Uses the seeded administrator account (``python src/manage.py seed``).
    """

    def on_start(self):
        self.state = AdminState()

    @task
    def login(self):
        with self.client.post(
            "/users/login",
            json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
            catch_response=True,
            name="POST /users/login (admin)",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Admin login failed: {resp.status_code}")
                self.interrupt()

    @task
    def create_product(self):
        with self.client.post(
            "/products",
            json=product_data(),
            headers=self.state.auth_headers,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["_id"]
            else:
                resp.failure(f"Create product failed: {resp.status_code}")
                self.interrupt()

    @task
    def update_product(self):
        with self.client.put(
            f"/products/{self.state.product_id}",
            json=product_update(),
            headers=self.state.auth_headers,
            catch_response=True,
            name="PUT /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update product failed: {resp.status_code}")

    @task
    def deactivate_product(self):
        # Most products stay listed so shoppers have something to buy
        if random.random() < 0.7:
            self.interrupt()
            return
        with self.client.delete(
            f"/products/{self.state.product_id}",
            headers=self.state.auth_headers,
            catch_response=True,
            name="DELETE /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Deactivate product failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class CatalogueUser(HttpUser):
    """Standalone user for catalogue-only load testing."""

    wait_time = between(0.5, 2.0)
    tasks = {
        BrowseCatalogJourney: 8,
        AdminProductJourney: 1,
    }
