"""Global Wealth ID: credit score conversion between countries."""
