"""Purchase receipt template — sent after an order is recorded."""

from html import escape


def _money(amount) -> str:
    return f"${amount:.2f}"


class ReceiptTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        total = context.get("total_price", 0.0)
        lines = context.get("lines", [])

        plain_lines = "".join(
            f"\nName: {line['name']}\nPrice: {_money(line['price'])}\nQuantity: {line['quantity']}\n"
            "--------------------------------\n"
            for line in lines
        )
        html_rows = "".join(
            f"<tr><td>{escape(line['name'])}</td><td>{_money(line['price'])}</td><td>{line['quantity']}</td></tr>"
            for line in lines
        )

        return {
            "subject": "Purchase receipt",
            "body": (
                "Invoice\n"
                "------------------------------\n"
                f"Total Price: {_money(total)}\n"
                "------------------------------\n"
                f"Products:\n{plain_lines}"
            ),
            "html_body": (
                "<h1>Invoice</h1>"
                f"<table><tr><td><b>Total Price:</b></td><td>{_money(total)}</td></tr></table>"
                "<h2>Products</h2>"
                f"<table><tr><th>Name</th><th>Price</th><th>Quantity</th></tr>{html_rows}</table>"
            ),
        }
