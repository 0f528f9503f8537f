"""
Script to seed a demo user and sample recipes into MongoDB
Run: python scripts/seed_recipes.py
"""

import asyncio
import sys
import os
from datetime import datetime, timezone

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.auth.passwords import hash_password
from core.config import DB_NAME
from database.mongo import ensure_indexes, recipe_collection, users_collection

DEMO_USER = {
    "username": "demo_chef",
    "email": "demo@example.com",
    "password": "password123",
}

SAMPLE_RECIPES = [
    {
        "title": "Chicken Pho",
        "ingredients": ["chicken", "rice noodles", "onion", "ginger", "star anise"],
        "steps": ["Simmer the broth", "Cook the noodles", "Season", "Serve hot"],
        "image": "https://via.placeholder.com/300?text=Chicken+Pho",
        "preparation_time": 45,
    },
    {
        "title": "Broken Rice with Grilled Pork",
        "ingredients": ["broken rice", "pork chop", "fish sauce", "garlic"],
        "steps": ["Marinate the pork", "Grill", "Cook the rice", "Plate up"],
        "image": "https://via.placeholder.com/300?text=Com+Tam",
        "preparation_time": 30,
    },
    {
        "title": "Banh Mi",
        "ingredients": ["baguette", "pork", "tomato", "cucumber", "coriander"],
        "steps": ["Grill the pork", "Warm the bread", "Layer the fillings"],
        "preparation_time": 25,
    },
    {
        "title": "Yangzhou Fried Rice",
        "ingredients": ["rice", "shrimp", "egg", "peas", "spring onion"],
        "steps": ["Prepare the ingredients", "Fry the rice", "Toss everything together"],
        "preparation_time": 20,
    },
]


async def seed_recipes():
    """Seed sample recipes into MongoDB"""
    try:
        print(f"🔄 Connecting to MongoDB: {DB_NAME}")
        await ensure_indexes()

        existing_count = await recipe_collection().count_documents({})
        print(f"📊 Existing recipes: {existing_count}")
        if existing_count > 0:
            print("ℹ️  Database already has recipes. Skipping seed.")
            return

        now = datetime.now(timezone.utc)
        user = await users_collection().find_one({"email": DEMO_USER["email"]})
        if not user:
            user = {
                "username": DEMO_USER["username"],
                "email": DEMO_USER["email"],
                "password_hash": hash_password(DEMO_USER["password"]),
                "created_at": now,
                "updated_at": now,
            }
            result = await users_collection().insert_one(user)
            user["_id"] = result.inserted_id
            print(f"👤 Created demo user {DEMO_USER['email']} / {DEMO_USER['password']}")

        docs = [
            {
                **recipe,
                "image": recipe.get("image"),
                "author": user["_id"],
                "ratings": [],
                "comments": [],
                "average_rating": 0.0,
                "created_at": now,
                "updated_at": now,
            }
            for recipe in SAMPLE_RECIPES
        ]

        print(f"\n📝 Inserting {len(docs)} sample recipes...")
        result = await recipe_collection().insert_many(docs)
        print(f"✅ Successfully inserted {len(result.inserted_ids)} recipes!")

    except Exception as e:
        print(f"❌ Error seeding recipes: {e}")
        import traceback
        traceback.print_exc()

if __name__ == "__main__":
    asyncio.run(seed_recipes())
