"""
Seed script to create the schema and the default development accounts.
Safe to run repeatedly: accounts are only created when no users exist.
"""
import logging

from leavedesk.db.init_db import init_db
from leavedesk.db.session import SessionLocal, engine


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    init_db(engine, SessionLocal, seed=True)
    print("\nYou can now login with:")
    print("  Admin: admin / admin123")
    print("  Employee: john.doe / password123")
