# core/startup.py
async def ensure_indexes(db):
    await db["users"].create_index("email", unique=True)
    await db["profiles"].create_index("user", unique=True)
    await db["profiles"].create_index("handle")
