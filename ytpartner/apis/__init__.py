"""Descriptor tables for the supported API versions."""

from ytpartner.apis import youtube_partner_v1

__all__ = ['youtube_partner_v1']
