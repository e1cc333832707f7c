"""CLI commands for FridgeChef."""

import argparse
import asyncio
import getpass
import json
import sys

import bcrypt
from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.models.user import User
from app.services.ai_service import ConfigError, ParseError, UpstreamError
from app.services.recipe_service import RecipeService
from app.services.recipe_types import ScannedIngredient


def create_user(email: str, password: str | None = None, name: str | None = None) -> None:
    """Create a user account."""
    db: Session = SessionLocal()

    try:
        # Check if email already exists
        existing = db.query(User).filter(User.email == email.lower()).first()
        if existing:
            print(f"Error: User with email '{email}' already exists.")
            sys.exit(1)

        # Get password if not provided
        if not password:
            password = getpass.getpass("Password: ")
            password_confirm = getpass.getpass("Confirm password: ")
            if password != password_confirm:
                print("Error: Passwords do not match.")
                sys.exit(1)

        if len(password) < 6:
            print("Error: Password must be at least 6 characters.")
            sys.exit(1)

        password_hash = bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt()
        ).decode("utf-8")
        user = User(email=email.lower(), password_hash=password_hash, name=name)
        db.add(user)
        db.commit()

        print(f"User created successfully: {email}")

    finally:
        db.close()


def load_pool(path: str) -> list[ScannedIngredient]:
    """Read a JSON array of ingredients ({name, quantity, unit, macrosPer100g})."""
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("ingredients", [])
    if not isinstance(data, list):
        raise ValueError("Pool file must contain a JSON array of ingredients")
    return [ScannedIngredient.from_dict(item) for item in data if isinstance(item, dict)]


def generate_recipes(pool_path: str) -> None:
    """Run the recipe pipeline on a pool file and print the ranked recipes."""
    try:
        pool = load_pool(pool_path)
    except (OSError, ValueError) as e:
        print(f"Error: Could not read pool file: {e}")
        sys.exit(1)

    try:
        recipes = asyncio.run(RecipeService().generate(pool))
    except (ConfigError, UpstreamError, ParseError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(json.dumps([recipe.to_dict() for recipe in recipes], indent=2))


def main():
    parser = argparse.ArgumentParser(description="FridgeChef CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # create-user command
    create_user_parser = subparsers.add_parser(
        "create-user", help="Create a user account"
    )
    create_user_parser.add_argument("--email", required=True, help="Email address")
    create_user_parser.add_argument(
        "--password", help="Password (will prompt if not provided)"
    )
    create_user_parser.add_argument("--name", help="Display name")

    # generate-recipes command
    generate_parser = subparsers.add_parser(
        "generate-recipes", help="Generate ranked recipes for an ingredient pool"
    )
    generate_parser.add_argument(
        "--pool", required=True, help="Path to a JSON file with the ingredient pool"
    )

    args = parser.parse_args()

    if args.command == "create-user":
        create_user(args.email, args.password, args.name)
    elif args.command == "generate-recipes":
        generate_recipes(args.pool)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
