"""initial restaurant schema

Revision ID: 3a7c9e21b4f0
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e21b4f0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('admin_users'):
        op.create_table(
            'admin_users',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('username', sa.String(length=100), nullable=False),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('role', sa.String(length=50), nullable=False, server_default='admin'),
            sa.Column('token_version', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_admin_users_username', 'admin_users', ['username'], unique=True)

    if not insp.has_table('menu_items'):
        op.create_table(
            'menu_items',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('category', sa.String(length=100), nullable=True),
            sa.Column('name', sa.String(length=200), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('price', sa.String(length=50), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_menu_items_category', 'menu_items', ['category'])

    if not insp.has_table('menu_pdfs'):
        op.create_table(
            'menu_pdfs',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('filename', sa.String(length=255), nullable=False, unique=True),
            sa.Column('original_name', sa.String(length=255), nullable=False),
            sa.Column('file_size', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('page_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('uploaded_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_menu_pdfs_is_active', 'menu_pdfs', ['is_active'])

    if not insp.has_table('gallery_images'):
        op.create_table(
            'gallery_images',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('url', sa.String(length=1000), nullable=False),
            sa.Column('alt', sa.String(length=255), nullable=True),
            sa.Column('title', sa.String(length=255), nullable=True),
            sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('stored_filename', sa.String(length=255), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_gallery_images_sort_order', 'gallery_images', ['sort_order'])

    if not insp.has_table('reservations'):
        op.create_table(
            'reservations',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('guests', sa.String(length=50), nullable=False),
            sa.Column('requirements', sa.Text(), nullable=True),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_reservations_date', 'reservations', ['date'])
        op.create_index('ix_reservations_status', 'reservations', ['status'])
        op.create_index('ix_reservations_created_at', 'reservations', ['created_at'])

    if not insp.has_table('settings'):
        op.create_table(
            'settings',
            sa.Column('key', sa.String(length=100), primary_key=True),
            sa.Column('value', sa.Text(), nullable=True),
        )

    if not insp.has_table('faqs'):
        op.create_table(
            'faqs',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('question', sa.String(length=500), nullable=False),
            sa.Column('answer', sa.Text(), nullable=False),
            sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_faqs_sort_order', 'faqs', ['sort_order'])
        op.create_index('ix_faqs_is_active', 'faqs', ['is_active'])

    if not insp.has_table('contacts'):
        op.create_table(
            'contacts',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('phone', sa.String(length=50), nullable=True),
            sa.Column('subject', sa.String(length=255), nullable=False),
            sa.Column('message', sa.Text(), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='new'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_contacts_status', 'contacts', ['status'])
        op.create_index('ix_contacts_created_at', 'contacts', ['created_at'])


def downgrade():
    for table in ('contacts', 'faqs', 'settings', 'reservations', 'gallery_images',
                  'menu_pdfs', 'menu_items', 'admin_users'):
        op.drop_table(table)
