from __future__ import annotations

import asyncio

from mongomock_motor import AsyncMongoMockClient

from database import mongo
from scripts.seed_recipes import SAMPLE_RECIPES, seed_recipes


def test_seed_inserts_sample_recipes_once():
    mongo.set_client(AsyncMongoMockClient())

    async def main():
        await seed_recipes()
        await seed_recipes()
        recipes = await mongo.recipe_collection().count_documents({})
        users = await mongo.users_collection().count_documents({})
        return recipes, users

    try:
        recipes, users = asyncio.run(main())
    finally:
        mongo.set_client(None)

    assert recipes == len(SAMPLE_RECIPES)
    assert users == 1
