"""ips — CLI do dzielenia polityk IAM (komendy w ips.commands)."""

__version__ = "0.1.0"
