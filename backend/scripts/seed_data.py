"""
Seed sample businesses, reviews and photos for development.
Run: python -m scripts.seed_data  (from backend/)
"""

import asyncio

from business_api.db.session import async_session
from business_api.repositories import businesses, photos, reviews


SEED_BUSINESSES = [
    {
        "ownerid": 1,
        "name": "Block 15",
        "address": "300 SW Jefferson Ave.",
        "city": "Corvallis",
        "state": "OR",
        "zip": "97333",
        "phone": "541-758-2077",
        "category": "Restaurant",
        "subcategory": "Brewpub",
        "website": "http://block15.com",
    },
    {
        "ownerid": 2,
        "name": "Interzone",
        "address": "1563 NW Monroe Ave.",
        "city": "Corvallis",
        "state": "OR",
        "zip": "97330",
        "phone": "541-754-5965",
        "category": "Restaurant",
        "subcategory": "Coffee Shop",
    },
    {
        "ownerid": 2,
        "name": "Robnett's Hardware",
        "address": "400 SW 2nd St.",
        "city": "Corvallis",
        "state": "OR",
        "zip": "97333",
        "phone": "541-753-5531",
        "category": "Shopping",
        "subcategory": "Hardware",
        "email": "info@robnetts.com",
    },
]

# businessid is filled in with the id of the seeded business at that index
SEED_REVIEWS = [
    (0, {"userid": 7, "dollars": 2, "stars": 4, "review": "Great beer, great food."}),
    (1, {"userid": 7, "dollars": 1, "stars": 5, "review": "Best coffee in town."}),
    (1, {"userid": 3, "dollars": 1, "stars": 4}),
]

SEED_PHOTOS = [
    (0, {"userid": 7, "caption": "Tap list"}),
    (2, {"userid": 3}),
]


async def seed():
    """Create tables if needed and insert seed rows."""
    async with async_session() as session:
        await businesses.create_table(session)
        await reviews.create_table(session)
        await photos.create_table(session)

        business_ids = []
        for data in SEED_BUSINESSES:
            business_id = await businesses.insert_business(session, data)
            business_ids.append(business_id)
            print(f"  Created business: {data['name']} (id={business_id})")

        for index, data in SEED_REVIEWS:
            await reviews.insert_review(session, {**data, "businessid": business_ids[index]})
        for index, data in SEED_PHOTOS:
            await photos.insert_photo(session, {**data, "businessid": business_ids[index]})

        await session.commit()
    print(
        f"Seeded {len(SEED_BUSINESSES)} businesses, "
        f"{len(SEED_REVIEWS)} reviews, {len(SEED_PHOTOS)} photos."
    )


if __name__ == "__main__":
    asyncio.run(seed())
