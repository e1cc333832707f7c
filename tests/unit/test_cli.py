"""
Unit tests for CLI commands.

Tests the command-line interface for account creation and offline recipe runs.
"""
import json

import pytest
from unittest.mock import patch, MagicMock, AsyncMock
from sqlalchemy.orm import Session

import bcrypt

from app.cli import create_user, generate_recipes, load_pool, main
from app.models.user import User
from app.services.ai_service import UpstreamError
from app.services.recipe_types import Macros, MealTiming, Recipe
from tests.factories import default_pool


# =============================================================================
# create_user Tests
# =============================================================================

class TestCreateUser:
    """Tests for the create_user function."""

    def test_create_user_success(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print:

            create_user("chef@test.com", "securepassword123", name="Chef")

            user = db.query(User).filter(User.email == "chef@test.com").first()
            assert user is not None
            assert user.name == "Chef"

            mock_print.assert_called_with("User created successfully: chef@test.com")

    def test_create_user_email_normalized(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print'):

            create_user("Chef@Test.COM", "password123")

            assert db.query(User).filter(User.email == "chef@test.com").first() is not None

    def test_create_user_duplicate_email(self, db: Session, test_user):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:

            create_user(test_user.email, "newpassword123")

        assert exc_info.value.code == 1
        assert "already exists" in str(mock_print.call_args)

    def test_create_user_password_too_short(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:

            create_user("short@test.com", "12345")

        assert exc_info.value.code == 1
        assert "at least 6 characters" in str(mock_print.call_args)

    def test_create_user_prompts_for_password(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('getpass.getpass', side_effect=["password123", "password123"]), \
             patch('builtins.print'):

            create_user("prompt@test.com")

            user = db.query(User).filter(User.email == "prompt@test.com").first()
            assert bcrypt.checkpw(b"password123", user.password_hash.encode("utf-8"))

    def test_create_user_password_mismatch(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('getpass.getpass', side_effect=["password123", "different456"]), \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit):

            create_user("mismatch@test.com")

        assert "do not match" in str(mock_print.call_args)

    def test_session_closed_on_error(self, test_user):
        mock_session = MagicMock()
        mock_session.query.return_value.filter.return_value.first.return_value = test_user

        with patch('app.cli.SessionLocal', return_value=mock_session), \
             patch('builtins.print'), \
             pytest.raises(SystemExit):

            create_user(test_user.email, "password123")

        mock_session.close.assert_called_once()


# =============================================================================
# Recipe generation Tests
# =============================================================================

class TestLoadPool:
    def test_list_file(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text(json.dumps(default_pool()))

        pool = load_pool(str(path))

        assert [item.name for item in pool] == ["Chicken Breast", "Rice"]
        assert pool[0].macros_per_100g.protein == 31.0

    def test_object_with_ingredients_key(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text(json.dumps({"ingredients": default_pool()[:1]}))

        assert len(load_pool(str(path))) == 1

    def test_rejects_non_list(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text('"chicken"')

        with pytest.raises(ValueError):
            load_pool(str(path))


class TestGenerateRecipes:
    def test_prints_ranked_recipes(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text(json.dumps(default_pool()))
        recipe = Recipe(
            id="1",
            name="Chicken Rice Bowl",
            description="",
            ingredients=(),
            steps=("Cook",),
            macros=Macros(calories=525, protein=66, carbs=42, fat=8),
            prep_time=10,
            cook_time=20,
            servings=2,
            health_score=8,
            match_score=75,
            ingredients_used=2,
            total_ingredients=2,
            meal_timing=MealTiming.POST_WORKOUT,
        )

        with patch('app.cli.RecipeService') as MockService, \
             patch('builtins.print') as mock_print:
            MockService.return_value.generate = AsyncMock(return_value=[recipe])

            generate_recipes(str(path))

        printed = json.loads(mock_print.call_args.args[0])
        assert printed[0]["name"] == "Chicken Rice Bowl"
        assert printed[0]["matchScore"] == 75

    def test_upstream_failure_exits(self, tmp_path):
        path = tmp_path / "pool.json"
        path.write_text(json.dumps(default_pool()))

        with patch('app.cli.RecipeService') as MockService, \
             patch('builtins.print') as mock_print, \
             pytest.raises(SystemExit) as exc_info:
            MockService.return_value.generate = AsyncMock(side_effect=UpstreamError("down"))

            generate_recipes(str(path))

        assert exc_info.value.code == 1
        assert "down" in str(mock_print.call_args)

    def test_missing_file_exits(self, tmp_path):
        with patch('builtins.print'), pytest.raises(SystemExit) as exc_info:
            generate_recipes(str(tmp_path / "missing.json"))

        assert exc_info.value.code == 1


# =============================================================================
# main() Tests
# =============================================================================

class TestMain:
    def test_main_create_user(self, db: Session):
        with patch('app.cli.SessionLocal', return_value=db), \
             patch('sys.argv', ['fridgechef', 'create-user', '--email', 'cli@test.com', '--password', 'password123']), \
             patch('builtins.print'):

            main()

            assert db.query(User).filter(User.email == "cli@test.com").first() is not None

    def test_main_generate_recipes(self):
        with patch('app.cli.generate_recipes') as mock_generate, \
             patch('sys.argv', ['fridgechef', 'generate-recipes', '--pool', 'pool.json']):

            main()

        mock_generate.assert_called_once_with('pool.json')

    def test_main_no_command_shows_help(self):
        with patch('sys.argv', ['fridgechef']), \
             patch('builtins.print'), \
             pytest.raises(SystemExit) as exc_info:

            main()

        assert exc_info.value.code == 1

    def test_main_create_user_missing_email(self):
        with patch('sys.argv', ['fridgechef', 'create-user']), \
             pytest.raises(SystemExit) as exc_info:

            main()

        assert exc_info.value.code == 2
