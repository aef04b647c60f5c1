import atexit
import os

from taskhub import create_app, close_db


def start_app():
    """Main application entry point"""
    app = create_app()
    atexit.register(close_db, app)

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "3000"))
    app.run(host=host, port=port)


if __name__ == "__main__":
    start_app()
