"""initial ledger schema

Revision ID: 3c1f0a7d9b21
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c1f0a7d9b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

party_type = sa.Enum('CUSTOMER', 'SUPPLIER', name='partytype')
invoice_type = sa.Enum('SALES', 'PURCHASE', name='invoicetype')
payment_mode = sa.Enum('CASH', 'CREDIT', 'ONLINE', 'CHEQUE', name='paymentmode')
payment_method = sa.Enum('CASH', 'ONLINE', 'CHEQUE', name='paymentmethod')
movement_direction = sa.Enum('IN', 'OUT', 'ADJUSTMENT', name='movementdirection')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'parties',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('mobile', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('gst_no', sa.String(), nullable=True),
        sa.Column('opening_balance', sa.Numeric(14, 2), nullable=False),
        sa.Column('type', party_type, nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_parties_id', 'parties', ['id'])

    op.create_table(
        'items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('hsn', sa.String(), nullable=True),
        sa.Column('unit', sa.String(), nullable=False),
        sa.Column('barcode', sa.String(), nullable=True),
        sa.Column('purchase_rate', sa.Numeric(14, 2), nullable=False),
        sa.Column('sale_rate', sa.Numeric(14, 2), nullable=False),
        sa.Column('tax_percent', sa.Numeric(5, 2), nullable=False),
        sa.Column('stock', sa.Numeric(14, 3), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_items_id', 'items', ['id'])

    op.create_table(
        'invoices',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('sequence_no', sa.Integer(), nullable=False),
        sa.Column('invoice_no', sa.String(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('party_id', sa.Integer(), nullable=False),
        sa.Column('party_name', sa.String(), nullable=False),
        sa.Column('type', invoice_type, nullable=False),
        sa.Column('subtotal', sa.Numeric(14, 2), nullable=False),
        sa.Column('tax_amount', sa.Numeric(14, 2), nullable=False),
        sa.Column('round_off', sa.Numeric(14, 2), nullable=False),
        sa.Column('grand_total', sa.Numeric(14, 2), nullable=False),
        sa.Column('payment_mode', payment_mode, nullable=False),
        sa.Column('payment_details', sa.Text(), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_invoices_id', 'invoices', ['id'])
    op.create_index('ix_invoices_invoice_no', 'invoices', ['invoice_no'], unique=True)
    op.create_index('ix_invoices_sequence_no', 'invoices', ['sequence_no'])
    op.create_index('ix_invoices_date', 'invoices', ['date'])
    op.create_index('ix_invoices_party_id', 'invoices', ['party_id'])

    op.create_table(
        'invoice_lines',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('invoice_id', sa.Integer(), sa.ForeignKey('invoices.id'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('item_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('qty', sa.Numeric(14, 3), nullable=False),
        sa.Column('rate', sa.Numeric(14, 2), nullable=False),
        sa.Column('discount_percent', sa.Numeric(5, 2), nullable=False),
        sa.Column('tax_percent', sa.Numeric(5, 2), nullable=False),
        sa.Column('amount', sa.Numeric(14, 2), nullable=False),
        sa.Column('tax', sa.Numeric(14, 2), nullable=False),
    )
    op.create_index('ix_invoice_lines_id', 'invoice_lines', ['id'])

    op.create_table(
        'stock_movements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('item_name', sa.String(), nullable=True),
        sa.Column('qty', sa.Numeric(14, 3), nullable=False),
        sa.Column('direction', movement_direction, nullable=False),
        sa.Column('reference_id', sa.String(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_stock_movements_id', 'stock_movements', ['id'])
    op.create_index('ix_stock_movements_item_id', 'stock_movements', ['item_id'])
    op.create_index('ix_stock_movements_reference_id', 'stock_movements', ['reference_id'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('party_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(14, 2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('mode', payment_method, nullable=False),
        sa.Column('reference', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_payments_id', 'payments', ['id'])
    op.create_index('ix_payments_party_id', 'payments', ['party_id'])
    op.create_index('ix_payments_date', 'payments', ['date'])


def downgrade() -> None:
    op.drop_table('payments')
    op.drop_table('stock_movements')
    op.drop_table('invoice_lines')
    op.drop_table('invoices')
    op.drop_table('items')
    op.drop_table('parties')
    for enum_type in (movement_direction, payment_method, payment_mode, invoice_type, party_type):
        enum_type.drop(op.get_bind(), checkfirst=True)
