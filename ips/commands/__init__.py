"""Komendy ips: split, validate, measure."""
