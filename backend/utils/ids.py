import secrets

def next_id() -> str:
    """32 hex chars from 16 random bytes"""
    return secrets.token_hex(16)
