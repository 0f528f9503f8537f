from __future__ import annotations

import os

# Cheap hashes and a fixed secret for the test run
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from database import mongo
from main_async import app


@pytest.fixture
def client():
    mongo.set_client(AsyncMongoMockClient())
    with TestClient(app) as c:  # runs startup, which builds the indexes
        yield c
    mongo.set_client(None)


def register(c, username, email=None, password="password123"):
    email = email or f"{username}@example.com"
    return c.post("/auth/register", json={"username": username, "email": email, "password": password})


def login(c, username, password="password123"):
    resp = c.post("/auth/login", json={"email": f"{username}@example.com", "password": password})
    return resp.json()["token"]


def auth_headers(c, username):
    register(c, username)
    return {"Authorization": f"Bearer {login(c, username)}"}


def create_recipe(c, headers, **overrides):
    body = {
        "title": "Fried Rice",
        "ingredients": ["rice", "egg", "carrot"],
        "steps": ["Boil rice", "Fry everything"],
        "preparationTime": 20,
    }
    body.update(overrides)
    resp = c.post("/recipes", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()
