"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lms.database import Base


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class User(TimestampMixin, Base):
    """User account model."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    # Password-less for social-login users
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="user")
    is_verified: Mapped[bool] = mapped_column(nullable=False, default=False)
    avatar: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    courses: Mapped[list["Enrollment"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Enrollment.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class Enrollment(Base):
    """A course id in a user's enrolled list."""

    __tablename__ = "user_courses"
    __table_args__ = (UniqueConstraint("user_id", "course_id", name="uq_user_course"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    # Plain column: enrollments outlive deleted courses
    course_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    user: Mapped[User] = relationship(back_populates="courses")


class Course(TimestampMixin, Base):
    """Course model with nested content, reviews and aggregates."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    estimated_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    thumbnail: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    tags: Mapped[str] = mapped_column(String(500), nullable=False)
    level: Mapped[str] = mapped_column(String(100), nullable=False)
    demo_url: Mapped[str] = mapped_column(String(500), nullable=False)
    benefits: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    prerequisites: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    ratings: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    purchased: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    course_data: Mapped[list["CourseContent"]] = relationship(
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="CourseContent.position",
        lazy="selectin",
    )
    reviews: Mapped[list["Review"]] = relationship(
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="Review.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of Course."""
        return f"<Course(id={self.id}, name='{self.name}')>"


class CourseContent(Base):
    """A titled unit of a course (video plus metadata) holding question threads."""

    __tablename__ = "course_data"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), index=True, nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    video_thumbnail: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    video_section: Mapped[str | None] = mapped_column(String(255), nullable=True)
    video_length: Mapped[int | None] = mapped_column(Integer, nullable=True)
    video_player_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    links: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    suggestions: Mapped[str | None] = mapped_column(Text, nullable=True)

    course: Mapped[Course] = relationship(back_populates="course_data")
    questions: Mapped[list["Comment"]] = relationship(
        back_populates="course_content",
        cascade="all, delete-orphan",
        order_by="Comment.id",
        lazy="selectin",
    )


class Review(TimestampMixin, Base):
    """A user's rating and comment on a course."""

    __tablename__ = "reviews"
    __table_args__ = (UniqueConstraint("course_id", "user_id", name="uq_review_course_user"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), index=True, nullable=False
    )
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), index=True, nullable=True
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    course: Mapped[Course] = relationship(back_populates="reviews")
    user: Mapped[User | None] = relationship(lazy="selectin")
    comment_replies: Mapped[list["Comment"]] = relationship(
        back_populates="review",
        cascade="all, delete-orphan",
        order_by="Comment.id",
        lazy="selectin",
    )


class Comment(TimestampMixin, Base):
    """
    Comment node used for questions, answers and review replies.

    Exactly one owner column is set: course_data_id for a question,
    parent_id for an answer, review_id for a review reply.
    """

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), index=True, nullable=True
    )
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    course_data_id: Mapped[int | None] = mapped_column(
        ForeignKey("course_data.id", ondelete="CASCADE"), index=True, nullable=True
    )
    review_id: Mapped[int | None] = mapped_column(
        ForeignKey("reviews.id", ondelete="CASCADE"), index=True, nullable=True
    )
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("comments.id", ondelete="CASCADE"), index=True, nullable=True
    )

    user: Mapped[User | None] = relationship(lazy="selectin")
    course_content: Mapped[CourseContent | None] = relationship(back_populates="questions")
    review: Mapped[Review | None] = relationship(back_populates="comment_replies")
    parent: Mapped["Comment | None"] = relationship(
        back_populates="comment_replies", remote_side="Comment.id"
    )
    comment_replies: Mapped[list["Comment"]] = relationship(
        back_populates="parent",
        cascade="all, delete-orphan",
        order_by="Comment.id",
        lazy="selectin",
    )


class Order(TimestampMixin, Base):
    """Enrollment order. Append-only."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    # Plain columns: orders are never cascade-deleted with users or courses
    course_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    payment_info: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)


class Notification(TimestampMixin, Base):
    """Notification shown in the admin feed."""

    __tablename__ = "notifications"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="unread", index=True)
    user_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)


class Layout(TimestampMixin, Base):
    """Singleton-per-type content block (banner, FAQ, categories)."""

    __tablename__ = "layouts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    type: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    faq: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    categories: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    banner: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
