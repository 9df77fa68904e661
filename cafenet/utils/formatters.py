from cafenet.utils.settings import CURRENCY_PREFIX


def format_money(amount: int) -> str:
    """15000 -> 'Rp 15.000' (id-ID grouping)."""
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(int(amount)):,}".replace(",", ".")
    return f"{CURRENCY_PREFIX} {sign}{grouped}"
