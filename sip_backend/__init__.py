"""SIP calculator backend."""
