"""Receipt rendering"""

from ..models.checkout import Receipt

RULE = "-" * 22
LABEL_WIDTH = 17
NAME_WIDTH = 12


def display_amount(amount: float) -> int:
    """Monetary display truncates toward zero, it never rounds"""
    return int(amount)


def render_receipt(receipt: Receipt) -> str:
    output = ["** Checkout receipt **"]
    for line in receipt.lines:
        output.append(
            f"{line.quantity}x {line.item_name:<{NAME_WIDTH}}{display_amount(line.line_total)}"
        )
    output.append(RULE)
    output.append(f"{'Subtotal':<{LABEL_WIDTH}}{display_amount(receipt.subtotal)}")
    output.append(f"{'Shipping':<{LABEL_WIDTH}}{display_amount(receipt.shipping)}")
    output.append(f"{'Amount':<{LABEL_WIDTH}}{display_amount(receipt.total)}")
    output.append(f"{'Balance':<{LABEL_WIDTH}}{display_amount(receipt.balance)}")
    output.append("END.")
    return "\n".join(output)
