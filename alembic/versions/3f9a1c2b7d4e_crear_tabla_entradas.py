"""crear tabla entradas

Revision ID: 3f9a1c2b7d4e
Revises:
Create Date: 2026-10-19 10:12:31.208114
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '3f9a1c2b7d4e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # === entradas ===
    op.create_table(
        'entradas',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('numero_cedula', sa.String(255), nullable=False, unique=True),
        sa.Column('nombre_cliente', sa.String(255), nullable=False),
        sa.Column('nombre_funcion', sa.String(255), nullable=False),
        sa.Column('cantidad_entradas', sa.Integer(), nullable=False),
        sa.Column('horario_funcion', sa.String(255), nullable=False),
        mysql_engine='InnoDB',
        mysql_charset='utf8mb4',
        mysql_collate='utf8mb4_unicode_ci',
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('entradas')
