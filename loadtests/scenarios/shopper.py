"""Shopper load test scenarios.

Journeys run as a freshly registered customer: browse, place an order,
then pay for it or cancel it. Cancelling returns the reserved stock, so
the cancellation journey also exercises the compensation path.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import order_data, profile_update, registration_data
from loadtests.helpers.state import ShopperState


class _ShopperJourney(SequentialTaskSet):
    """Shared register and browse steps."""

    def on_start(self):
        self.state = ShopperState()

    def register(self):
        payload = registration_data()
        with self.client.post(
            "/users/register",
            json=payload,
            catch_response=True,
            name="POST /users/register",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.user_id = body["_id"]
                self.state.token = body["token"]
                self.state.email = payload["email"]
                self.state.password = payload["password"]
            else:
                resp.failure(f"Register failed: {resp.status_code}")
                self.interrupt()

    def browse(self):
        with self.client.get(
            "/products",
            params={"limit": 24, "sortBy": random.choice(["price-asc", "rating", "newest"])},
            catch_response=True,
            name="GET /products",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code}")
                self.interrupt()
                return
            self.state.products = [p for p in resp.json()["products"] if p.get("stock", 0) > 0]
            if not self.state.products:
                resp.failure("No products in stock")
                self.interrupt()

    def place_order(self):
        with self.client.post(
            "/orders",
            json=order_data(self.state.products),
            headers=self.state.auth_headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["_id"]
            elif resp.status_code == 400:
                # Another user bought the last units first
                resp.success()
                self.interrupt()
            else:
                resp.failure(f"Place order failed: {resp.status_code}")
                self.interrupt()


class OrderAndPayJourney(_ShopperJourney):
    """Register -> Browse -> Place order -> Pay -> Order history."""

    @task
    def step_register(self):
        self.register()

    @task
    def step_browse(self):
        self.browse()

    @task
    def step_place_order(self):
        self.place_order()

    @task
    def pay(self):
        with self.client.put(
            f"/orders/{self.state.order_id}/pay",
            json={"paymentReference": f"txn-{random.randint(100000, 999999)}"},
            headers=self.state.auth_headers,
            catch_response=True,
            name="PUT /orders/{id}/pay",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Pay order failed: {resp.status_code}")

    @task
    def history(self):
        with self.client.get(
            "/orders/myorders",
            headers=self.state.auth_headers,
            catch_response=True,
            name="GET /orders/myorders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Order history failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class OrderCancellationJourney(_ShopperJourney):
    """Register -> Browse -> Place order -> View order -> Cancel."""

    @task
    def step_register(self):
        self.register()

    @task
    def step_browse(self):
        self.browse()

    @task
    def step_place_order(self):
        self.place_order()

    @task
    def view_order(self):
        with self.client.get(
            f"/orders/{self.state.order_id}",
            headers=self.state.auth_headers,
            catch_response=True,
            name="GET /orders/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get order failed: {resp.status_code}")

    @task
    def cancel(self):
        with self.client.put(
            f"/orders/{self.state.order_id}/cancel",
            json={"reason": "Changed my mind"},
            headers=self.state.auth_headers,
            catch_response=True,
            name="PUT /orders/{id}/cancel",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Cancel order failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ReturningCustomerJourney(SequentialTaskSet):
    """Register -> Log in again -> Read profile -> Update profile."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        payload = registration_data()
        with self.client.post(
            "/users/register",
            json=payload,
            catch_response=True,
            name="POST /users/register",
        ) as resp:
            if resp.status_code == 201:
                self.state.email = payload["email"]
                self.state.password = payload["password"]
            else:
                resp.failure(f"Register failed: {resp.status_code}")
                self.interrupt()

    @task
    def login(self):
        with self.client.post(
            "/users/login",
            json={"email": self.state.email, "password": self.state.password},
            catch_response=True,
            name="POST /users/login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Login failed: {resp.status_code}")
                self.interrupt()

    @task
    def read_profile(self):
        with self.client.get(
            "/users/profile",
            headers=self.state.auth_headers,
            catch_response=True,
            name="GET /users/profile",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get profile failed: {resp.status_code}")

    @task
    def update_profile(self):
        with self.client.put(
            "/users/profile",
            json=profile_update(),
            headers=self.state.auth_headers,
            catch_response=True,
            name="PUT /users/profile",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update profile failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Standalone user for shopper-only load testing."""

    wait_time = between(1.0, 3.0)
    tasks = {
        OrderAndPayJourney: 5,
        OrderCancellationJourney: 2,
        ReturningCustomerJourney: 2,
    }
