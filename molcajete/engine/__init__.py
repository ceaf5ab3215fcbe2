#!/usr/bin/env python3
"""
molcajete.engine - plugin merge and setup pipeline
"""
from .merger import merge, canonical_ids
from .pipeline import setup, SetupResult

__all__ = ['merge', 'canonical_ids', 'setup', 'SetupResult']
