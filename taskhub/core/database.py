from pymongo import ASCENDING, MongoClient

USERS = "users"
PROJECTS = "projects"
TASKS = "tasks"


def connect(mongo_url: str) -> MongoClient:
    # MongoClient connects lazily; the first operation opens the pool.
    return MongoClient(mongo_url)


def close_client(client) -> None:
    client.close()


def init_db(db) -> None:
    """
    Create the indexes the API relies on. Collections themselves are
    created by MongoDB on first insert.
    """
    db[USERS].create_index([("email", ASCENDING)], unique=True, name="uniq_user_email")
