"""initial schema

Revision ID: 4f1c2a9e7b30
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9e7b30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("avatar", sa.String(500), nullable=False, server_default=""),
        sa.Column("role", sa.String(10), nullable=False, server_default="user"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "recipes",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("cuisine", sa.String(100), nullable=False, index=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("prep_time", sa.Integer(), nullable=False),
        sa.Column("cook_time", sa.Integer(), nullable=False),
        sa.Column("servings", sa.Integer(), nullable=False),
        sa.Column("difficulty", sa.String(10), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=False, server_default="Anonymous"),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    for table, columns in (
        (
            "recipe_ingredients",
            [
                sa.Column("name", sa.String(255), nullable=False),
                sa.Column("amount", sa.String(100), nullable=False),
            ],
        ),
        (
            "recipe_instructions",
            [
                sa.Column("step", sa.Integer(), nullable=False),
                sa.Column("instruction", sa.Text(), nullable=False),
            ],
        ),
        ("recipe_tags", [sa.Column("name", sa.String(100), nullable=False, index=True)]),
    ):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), primary_key=True, index=True),
            sa.Column(
                "recipe_id",
                sa.String(24),
                sa.ForeignKey("recipes.id", ondelete="CASCADE"),
                nullable=False,
                index=True,
            ),
            sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
            *columns,
        )

    op.create_table(
        "recipe_likes",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "recipe_id",
            sa.String(24),
            sa.ForeignKey("recipes.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "user_id",
            sa.String(24),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.UniqueConstraint("recipe_id", "user_id", name="uq_recipe_likes_user"),
    )

    op.create_table(
        "recipe_ratings",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "recipe_id",
            sa.String(24),
            sa.ForeignKey("recipes.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "user_id",
            sa.String(24),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("rating", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("recipe_id", "user_id", name="uq_recipe_ratings_user"),
    )

    op.create_table(
        "recipe_comments",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column(
            "recipe_id",
            sa.String(24),
            sa.ForeignKey("recipes.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "user_id",
            sa.String(24),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("content", sa.String(500), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "cart_items",
        sa.Column("id", sa.String(24), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(24),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("recipe_id", sa.String(24), nullable=False, index=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "added_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.UniqueConstraint("user_id", "recipe_id", name="uq_cart_items_recipe"),
    )


def downgrade() -> None:
    op.drop_table("cart_items")
    op.drop_table("recipe_comments")
    op.drop_table("recipe_ratings")
    op.drop_table("recipe_likes")
    op.drop_table("recipe_tags")
    op.drop_table("recipe_instructions")
    op.drop_table("recipe_ingredients")
    op.drop_table("recipes")
    op.drop_table("users")
