"""Currency formatting for human-readable engine output."""

from .rounding import round_half_up

RUPEE = "₹"


def group_indian_digits(digits: str) -> str:
    """
    Insert separators the Indian way: the last three digits form one
    group, every two digits before that form another (12,34,567).
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: float) -> str:
    """
    Format an amount as whole rupees.

    Examples:
        >>> format_inr(100000)
        '₹1,00,000'
        >>> format_inr(-5000)
        '-₹5,000'
    """
    rounded = round_half_up(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{RUPEE}{group_indian_digits(str(abs(rounded)))}"
