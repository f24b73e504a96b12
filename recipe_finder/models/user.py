"""User, follow and cart models."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship

from recipe_finder.database import Base
from recipe_finder.models.enums import UserRole
from recipe_finder.models.mixins import ObjectIdMixin, TimestampMixin, utcnow


class User(Base, ObjectIdMixin, TimestampMixin):
    """User model for authentication, social activity and the shopping cart."""

    __tablename__ = "users"

    name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(500), nullable=False, default="")
    role = Column(String(10), nullable=False, default=UserRole.USER.value)
    is_active = Column(Boolean, nullable=False, default=True)
    bio = Column(String(500), nullable=False, default="")

    cart = relationship(
        "CartItem",
        back_populates="user",
        order_by="CartItem.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    following_links = relationship(
        "UserFollow",
        foreign_keys="UserFollow.follower_id",
        back_populates="follower",
        order_by="UserFollow.id",
        cascade="all, delete-orphan",
    )
    follower_links = relationship(
        "UserFollow",
        foreign_keys="UserFollow.followed_id",
        back_populates="followed",
        order_by="UserFollow.id",
        cascade="all, delete-orphan",
    )

    @property
    def following(self) -> list["User"]:
        return [link.followed for link in self.following_links]

    @property
    def followers(self) -> list["User"]:
        return [link.follower for link in self.follower_links]

    @property
    def following_count(self) -> int:
        return len(self.following_links)

    @property
    def followers_count(self) -> int:
        return len(self.follower_links)

    def find_following(self, user_id: str) -> "UserFollow | None":
        return next((link for link in self.following_links if link.followed_id == user_id), None)

    def find_cart_item(self, recipe_id: str) -> "CartItem | None":
        return next((item for item in self.cart if item.recipe_id == recipe_id), None)


class UserFollow(Base, TimestampMixin):
    """One user following another."""

    __tablename__ = "user_follows"
    __table_args__ = (UniqueConstraint("follower_id", "followed_id", name="uq_user_follows_pair"),)

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(
        String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    followed_id = Column(
        String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    follower = relationship("User", foreign_keys=[follower_id], back_populates="following_links")
    followed = relationship("User", foreign_keys=[followed_id], back_populates="follower_links")


class CartItem(Base, ObjectIdMixin):
    """A recipe placed in a user's cart.

    ``recipe_id`` has no foreign key: deleting a recipe leaves the
    entry in place and it resolves to no recipe on read.
    """

    __tablename__ = "cart_items"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_cart_items_recipe"),)

    user_id = Column(
        String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recipe_id = Column(String(24), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=1)
    added_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    user = relationship("User", back_populates="cart")
    recipe = relationship(
        "Recipe",
        primaryjoin="foreign(CartItem.recipe_id) == Recipe.id",
        viewonly=True,
    )
