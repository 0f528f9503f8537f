from __future__ import annotations

from statistics import mean

import pytest

from conftest import auth_headers, create_recipe
from database import mongo


def _rate(c, recipe_id, value, headers):
    return c.post(f"/recipes/{recipe_id}/rate", json={"value": value}, headers=headers)


def _rating_count(c, recipe_id):
    from bson import ObjectId
    return c.portal.call(mongo.ratings_collection().count_documents, {"recipe": ObjectId(recipe_id)})


# ── Aggregation ──────────────────────────────────────────────────────────


def test_average_over_distinct_users(client):
    chef = auth_headers(client, "chef")
    recipe = create_recipe(client, chef)
    values = [5, 3, 4, 1, 2]

    for i, value in enumerate(values):
        resp = _rate(client, recipe["id"], value, auth_headers(client, f"user{i}"))
        assert resp.status_code == 200

    assert resp.json()["averageRating"] == pytest.approx(mean(values))
    assert _rating_count(client, recipe["id"]) == len(values)

    fetched = client.get(f"/recipes/{recipe['id']}").json()
    assert fetched["averageRating"] == pytest.approx(mean(values))
    assert sorted(r["value"] for r in fetched["ratings"]) == sorted(values)


def test_rerating_updates_in_place(client):
    chef = auth_headers(client, "chef")
    alice = auth_headers(client, "alice")
    bob = auth_headers(client, "bob")
    recipe = create_recipe(client, chef)

    _rate(client, recipe["id"], 5, alice)
    _rate(client, recipe["id"], 1, bob)
    resp = _rate(client, recipe["id"], 3, alice)

    assert resp.status_code == 200
    assert resp.json() == {"averageRating": 2.0}
    assert _rating_count(client, recipe["id"]) == 2

    fetched = client.get(f"/recipes/{recipe['id']}").json()
    assert len(fetched["ratings"]) == 2
    assert sorted(r["value"] for r in fetched["ratings"]) == [1, 3]


def test_first_rating_sets_average(client):
    chef = auth_headers(client, "chef")
    recipe = create_recipe(client, chef)
    resp = _rate(client, recipe["id"], 4, chef)
    assert resp.json() == {"averageRating": 4.0}


# ── Validation ───────────────────────────────────────────────────────────


@pytest.mark.parametrize("value", [0, 6, -1, 2.5, "five"])
def test_out_of_range_value_leaves_average_unchanged(client, value):
    chef = auth_headers(client, "chef")
    recipe = create_recipe(client, chef)
    _rate(client, recipe["id"], 4, chef)

    resp = _rate(client, recipe["id"], value, chef)
    assert resp.status_code == 400

    fetched = client.get(f"/recipes/{recipe['id']}").json()
    assert fetched["averageRating"] == 4.0
    assert [r["value"] for r in fetched["ratings"]] == [4]


def test_rate_requires_token(client):
    chef = auth_headers(client, "chef")
    recipe = create_recipe(client, chef)
    resp = client.post(f"/recipes/{recipe['id']}/rate", json={"value": 4})
    assert resp.status_code == 401


def test_rate_unknown_recipe(client):
    chef = auth_headers(client, "chef")
    resp = _rate(client, "64b7f0c2a1b2c3d4e5f60718", 4, chef)
    assert resp.status_code == 404


def test_rate_malformed_recipe_id(client):
    chef = auth_headers(client, "chef")
    resp = _rate(client, "nope", 4, chef)
    assert resp.status_code == 400


# ── Concurrency ──────────────────────────────────────────────────────────


def test_concurrent_ratings_keep_average_consistent():
    import asyncio
    from bson import ObjectId
    from mongomock_motor import AsyncMongoMockClient
    from utils.rating_handlers import rate_recipe_handler, recipe_locks

    mongo.set_client(AsyncMongoMockClient())
    users = [{"_id": ObjectId(), "username": f"user{i}"} for i in range(10)]
    values = [(i % 5) + 1 for i in range(10)]

    async def main():
        await mongo.ensure_indexes()
        result = await mongo.recipe_collection().insert_one({
            "title": "Stew", "ingredients": ["beef"], "steps": ["Simmer"],
            "preparation_time": 120, "ratings": [], "comments": [], "average_rating": 0.0,
        })
        recipe_id = str(result.inserted_id)
        await asyncio.gather(*(
            rate_recipe_handler(recipe_id, value, user) for user, value in zip(users, values)
        ))
        # Second round from the same users must not add ratings
        await asyncio.gather(*(rate_recipe_handler(recipe_id, 5, user) for user in users))
        return await mongo.recipe_collection().find_one({"_id": result.inserted_id})

    try:
        recipe = asyncio.run(main())
    finally:
        mongo.set_client(None)

    assert len(recipe["ratings"]) == len(users)
    assert recipe["average_rating"] == 5.0
    assert len(recipe_locks) == 0
