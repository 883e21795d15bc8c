"""
Locust Load Testing for the Member Authentication API

Usage:
    locust -f test_api/locustfile.py --host=http://127.0.0.1:8000

    Or run headless:
    locust -f test_api/locustfile.py --host=http://127.0.0.1:8000 --headless -u 100 -r 10 -t 5m
"""

from locust import HttpUser, task, between
import random
import string
import time
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def generate_random_email():
    """Generate a random email for testing."""
    random_str = ''.join(random.choices(string.ascii_lowercase, k=8))
    return f"locust_{random_str}_{int(time.time()*1000)}@example.com"


def generate_random_password():
    """Generate a random password."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=10))


class MemberAuthUser(HttpUser):
    """
    Simulates a member registering once, then logging in and rotating
    refresh tokens.
    """

    wait_time = between(1, 5)

    def on_start(self):
        self.email = generate_random_email()
        self.password = generate_random_password()
        self.refresh_token = None
        with self.client.post(
            "/v1/auth/register",
            json={"email": self.email, "password": self.password, "name": "Locust Test"},
            name="Register",
            catch_response=True
        ) as response:
            if response.status_code == 201:
                self.refresh_token = response.json()["token"]["refreshToken"]
                response.success()
            else:
                response.failure(f"Register failed: {response.status_code}")

    @task(5)
    def login(self):
        with self.client.post(
            "/v1/auth/login",
            json={"email": self.email, "password": self.password},
            name="Login",
            catch_response=True
        ) as response:
            if response.status_code == 200:
                self.refresh_token = response.json()["token"]["refreshToken"]
                response.success()
            else:
                response.failure(f"Login failed: {response.status_code}")

    @task(3)
    def refresh(self):
        if not self.refresh_token:
            return
        with self.client.post(
            "/v1/auth/refresh-token",
            json={"email": self.email, "refreshToken": self.refresh_token},
            name="Refresh Token",
            catch_response=True
        ) as response:
            if response.status_code == 200:
                self.refresh_token = response.json()["refreshToken"]
                response.success()
            else:
                # the token was consumed by a concurrent task
                self.refresh_token = None
                response.failure(f"Refresh failed: {response.status_code}")

    @task(1)
    def login_wrong_password(self):
        with self.client.post(
            "/v1/auth/login",
            json={"email": self.email, "password": "wrong-password"},
            name="Login (wrong password)",
            catch_response=True
        ) as response:
            if response.status_code == 401:
                response.success()
            else:
                response.failure(f"Expected 401, got {response.status_code}")

    @task(10)
    def health_check(self):
        with self.client.get("/", name="Health Check", catch_response=True) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Health check failed: {response.status_code}")
