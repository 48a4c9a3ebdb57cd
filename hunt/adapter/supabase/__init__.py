"""Supabase Storage adapter."""

from .client import (
    MockSupabaseImageStorage,
    RealSupabaseImageStorage,
    SupabaseImageStorage,
)

__all__ = [
    "SupabaseImageStorage",
    "RealSupabaseImageStorage",
    "MockSupabaseImageStorage",
]
