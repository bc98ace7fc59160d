"""init schema

Revision ID: 20210714000000_init_schema
Revises: None
Create Date: 2021-07-14
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20210714000000_init_schema"
down_revision = None
branch_labels = None
depends_on = None


# Non-native enums render as VARCHAR, so no named DB type has to be created or dropped.
OBJECT_STATUSES = ("active", "deactive")
ROLE = sa.Enum("SuperAdmin", "Admin", "Users", "Anonymous", name="account_role", native_enum=False)


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("objectStatus", sa.Enum(*OBJECT_STATUSES, name="object_status", native_enum=False), nullable=True),
        sa.Column("createdBy", sa.String(255), nullable=True),
        sa.Column("updatedBy", sa.String(255), nullable=True),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "Accounts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("password", sa.String(255), nullable=True),
        sa.Column("token", sa.JSON(), nullable=True),
        sa.Column("referralCode", sa.String(255), nullable=True),
        sa.Column("hasExpired", sa.Boolean(), nullable=True),
        sa.Column("hasEnteredReferralCode", sa.Boolean(), nullable=True),
        sa.Column("role", ROLE, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "Challenges",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("totalDate", sa.Float(), nullable=True),
        sa.Column("price", sa.Float(precision=53), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("avatarUrl", sa.String(255), nullable=True),
        sa.Column("backgrounds", sa.Text(), nullable=True),
        sa.Column("totalRun", sa.Float(), nullable=True),
        sa.Column("minUserRun", sa.Float(), nullable=True),
        sa.Column("isGroupChallenges", sa.Boolean(), nullable=True),
        sa.Column("submittedBeforeDay", sa.Integer(), nullable=True),
        sa.Column("discountPrice", sa.Float(), nullable=True),
        sa.Column("starDateDiscount", sa.DateTime(timezone=True), nullable=True),
        sa.Column("endDateDiscount", sa.DateTime(timezone=True), nullable=True),
        sa.Column("totalNumberOfDiscounts", sa.Integer(), nullable=True),
        sa.Column("type", sa.String(255), nullable=True),
        sa.Column("giftReceivingMilestone", sa.String(255), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "ProductMainCategories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("code", sa.String(255), nullable=True),
        sa.Column("avatarUrl", sa.String(255), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "ProductCategories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("mainCategoryId", sa.Integer(), sa.ForeignKey("ProductMainCategories.id"), nullable=True),
        sa.Column("code", sa.String(255), nullable=True),
        sa.Column("avatarUrl", sa.String(255), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "Products",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("code", sa.String(255), nullable=True),
        sa.Column("categoryId", sa.Integer(), sa.ForeignKey("ProductCategories.id"), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=True),
        sa.Column("cashPrice", sa.Float(precision=53), nullable=True),
        sa.Column("pointsPrice", sa.Float(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("avatarUrl", sa.Text(), nullable=True),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("saleOff", sa.Float(), nullable=True),
        sa.Column("size", sa.String(255), nullable=True),
        sa.Column("thumb", sa.String(255), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "ProductComments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("comment", sa.String(255), nullable=False),
        sa.Column("userId", sa.Integer(), nullable=True),
        sa.Column("star", sa.Float(), nullable=False),
        sa.Column("nameUserComment", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("productId", sa.Integer(), sa.ForeignKey("Products.id"), nullable=False),
        *_audit_columns(),
    )

    op.create_table(
        "Categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("code", sa.String(255), nullable=True),
        sa.Column("level", sa.String(255), nullable=True),
        sa.Column("parentId", sa.Integer(), nullable=True),
        sa.Column("groupId", sa.Integer(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "ArticleCategories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("code", sa.String(255), nullable=True),
        sa.Column("avatarUrl", sa.String(255), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "Articles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("code", sa.String(255), nullable=True),
        sa.Column("banner", sa.String(255), nullable=True),
        sa.Column("tag", sa.String(255), nullable=True),
        sa.Column("categoryId", sa.Integer(), sa.ForeignKey("ArticleCategories.id"), nullable=True),
        *_audit_columns(),
    )

    op.create_index("idx_product_categories_main", "ProductCategories", ["mainCategoryId"])
    op.create_index("idx_products_category", "Products", ["categoryId"])
    op.create_index("idx_product_comments_product", "ProductComments", ["productId"])
    op.create_index("idx_articles_category", "Articles", ["categoryId"])


def downgrade() -> None:
    op.drop_index("idx_articles_category", table_name="Articles")
    op.drop_index("idx_product_comments_product", table_name="ProductComments")
    op.drop_index("idx_products_category", table_name="Products")
    op.drop_index("idx_product_categories_main", table_name="ProductCategories")

    op.drop_table("Articles")
    op.drop_table("ArticleCategories")
    op.drop_table("Categories")
    op.drop_table("ProductComments")
    op.drop_table("Products")
    op.drop_table("ProductCategories")
    op.drop_table("ProductMainCategories")
    op.drop_table("Challenges")
    op.drop_table("Accounts")
