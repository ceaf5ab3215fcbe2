#!/usr/bin/env python3
"""
molcajete.storage - settings file persistence
"""
from .settings import read_config, write_config, configured_plugins

__all__ = ['read_config', 'write_config', 'configured_plugins']
