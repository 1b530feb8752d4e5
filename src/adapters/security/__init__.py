from .password_hasher import BCryptPasswordHasher

__all__ = ["BCryptPasswordHasher"]
