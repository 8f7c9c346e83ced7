# recipe_ai/services/recipes_repo.py
from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, Union

from recipe_ai.models.recipe import Nutrition, ParsedRecipe, StoredRecipe

SORT_ORDERS = {
    "newest": "created_at DESC, id DESC",
    "oldest": "created_at ASC, id ASC",
    "title": "title COLLATE NOCASE ASC, id ASC",
    "calories": "calories DESC, id DESC",
}

SCHEMA = """
CREATE TABLE IF NOT EXISTS recipes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL,
    title TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    ingredients_json TEXT NOT NULL DEFAULT '[]',
    steps_json TEXT NOT NULL DEFAULT '[]',
    tips_json TEXT NOT NULL DEFAULT '[]',
    nutrition_json TEXT NOT NULL DEFAULT '{}',
    calories REAL NOT NULL DEFAULT 0,
    servings TEXT,
    prep_time TEXT,
    cook_time TEXT,
    total_time TEXT,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_recipes_user ON recipes (user_id);
CREATE UNIQUE INDEX IF NOT EXISTS idx_recipes_user_title ON recipes (user_id, title);
"""

_COLUMNS = (
    "id, user_id, title, description, ingredients_json, steps_json, tips_json, "
    "nutrition_json, servings, prep_time, cook_time, total_time, created_at"
)


class DuplicateRecipeError(Exception):
    def __init__(self, title: str):
        super().__init__(f"Recipe already exists: {title}")
        self.title = title


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class RecipeStore:
    """
    Owner-scoped recipe storage on SQLite.

    Built once by the app factory and handed to routes; every call opens its
    own short-lived connection. Rows are never updated after insert.
    """

    def __init__(self, db_path: Union[str, Path], now: Callable[[], str] = _now_iso):
        self.db_path = Path(db_path)
        self._now = now

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def ensure_schema(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.executescript(SCHEMA)
            conn.commit()

    def ping(self) -> None:
        with self._connect() as conn:
            conn.execute("SELECT 1;").fetchone()

    def save_recipe(self, *, user_id: str, recipe: ParsedRecipe) -> StoredRecipe:
        """Insert a new row. Raises DuplicateRecipeError if the owner already has the title."""
        now = self._now()
        title = recipe.title.strip()
        with self._connect() as conn:
            try:
                cur = conn.execute(
                    """
                    INSERT INTO recipes
                      (user_id, title, description, ingredients_json, steps_json, tips_json,
                       nutrition_json, calories, servings, prep_time, cook_time, total_time, created_at)
                    VALUES
                      (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        user_id,
                        title,
                        recipe.description,
                        json.dumps(recipe.ingredients, ensure_ascii=False),
                        json.dumps(recipe.steps, ensure_ascii=False),
                        json.dumps(recipe.tips, ensure_ascii=False),
                        json.dumps(recipe.nutrition.model_dump(), ensure_ascii=False),
                        float(recipe.nutrition.calories),
                        recipe.servings,
                        recipe.prep_time,
                        recipe.cook_time,
                        recipe.total_time,
                        now,
                    ),
                )
            except sqlite3.IntegrityError as e:
                raise DuplicateRecipeError(title) from e
            conn.commit()
            recipe_id = int(cur.lastrowid)

        return StoredRecipe(
            id=recipe_id,
            user_id=user_id,
            created_at=now,
            **recipe.model_dump(exclude={"title"}),
            title=title,
        )

    def find_by_title(self, *, user_id: str, title: str) -> Optional[StoredRecipe]:
        with self._connect() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM recipes WHERE user_id = ? AND title = ? LIMIT 1",
                (user_id, title.strip()),
            ).fetchone()
        return _from_row(row) if row else None

    def list_recipes(
        self,
        *,
        user_id: str,
        q: Optional[str] = None,
        sort: str = "newest",
        limit: int = 50,
    ) -> list[StoredRecipe]:
        """
        Owner's recipes in ``sort`` order. ``q`` is a case-insensitive
        substring match (casefolded, no wildcards) on title, description and
        each decoded ingredient, applied before ``limit``.
        """
        if sort not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {sort}")

        needle = (q or "").strip().casefold()
        sql = f"SELECT {_COLUMNS} FROM recipes WHERE user_id = ? ORDER BY {SORT_ORDERS[sort]}"
        params: list[Any] = [user_id]
        if not needle:
            sql += " LIMIT ?"
            params.append(int(limit))

        with self._connect() as conn:
            rows = conn.execute(sql, params).fetchall()

        recipes = [_from_row(r) for r in rows]
        if needle:
            recipes = [r for r in recipes if _matches(r, needle)][: int(limit)]
        return recipes

    def get_recipe(self, *, user_id: str, recipe_id: int) -> Optional[StoredRecipe]:
        with self._connect() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM recipes WHERE id = ? AND user_id = ?",
                (int(recipe_id), user_id),
            ).fetchone()
        return _from_row(row) if row else None

    def delete_recipe(self, *, user_id: str, recipe_id: int) -> bool:
        with self._connect() as conn:
            cur = conn.execute(
                "DELETE FROM recipes WHERE id = ? AND user_id = ?",
                (int(recipe_id), user_id),
            )
            conn.commit()
        return cur.rowcount > 0


def _matches(recipe: StoredRecipe, needle: str) -> bool:
    fields = [recipe.title, recipe.description, *recipe.ingredients]
    return any(needle in f.casefold() for f in fields)


def _loads(raw: Optional[str], default: Any) -> Any:
    try:
        return json.loads(raw) if raw else default
    except ValueError:
        return default


def _from_row(row: sqlite3.Row) -> StoredRecipe:
    return StoredRecipe(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        description=row["description"] or "",
        ingredients=_loads(row["ingredients_json"], []),
        steps=_loads(row["steps_json"], []),
        tips=_loads(row["tips_json"], []),
        nutrition=Nutrition(**_loads(row["nutrition_json"], {})),
        servings=row["servings"],
        prep_time=row["prep_time"],
        cook_time=row["cook_time"],
        total_time=row["total_time"],
        created_at=row["created_at"],
    )
