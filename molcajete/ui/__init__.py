#!/usr/bin/env python3
"""
molcajete.ui - User interface components
"""
from .interactive import prompt_for_plugins, parse_selection

__all__ = ['prompt_for_plugins', 'parse_selection']
