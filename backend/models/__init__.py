from models.parties import Party, PartyType
from models.items import Item
from models.invoices import Invoice, InvoiceType, PaymentMode
from models.invoice_lines import InvoiceLine
from models.stock_movements import StockMovement, MovementDirection
from models.payments import Payment, PaymentMethod

__all__ = ['Invoice', 'InvoiceLine', 'InvoiceType', 'Item', 'MovementDirection', 'Party', 'PartyType', 'Payment', 'PaymentMethod', 'PaymentMode', 'StockMovement',]
