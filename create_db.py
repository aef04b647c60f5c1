import os
from dotenv import load_dotenv
from pathlib import Path

load_dotenv(dotenv_path=Path(__file__).with_name(".env"), override=True)

from taskhub.core.database import connect, close_client, init_db  # import AFTER load_dotenv


def main():
    url = os.environ.get("MONGO_URL")
    if not url:
        raise RuntimeError("MONGO_URL is not set. Create a .env with MONGO_URL.")

    client = connect(url)
    try:
        # simple connectivity check
        client.admin.command("ping")
        print("Creating indexes…")
        init_db(client[os.environ.get("MONGO_DB", "taskhub")])
        print("Done.")
    finally:
        close_client(client)


if __name__ == "__main__":
    main()
