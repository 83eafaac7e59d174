"""WSGI entry point.

Run with: gunicorn -c gunicorn_config.py wsgi:app
"""
import atexit
import os

from social_api import create_app

app = create_app()
atexit.register(app.config["service_container"].shutdown)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
