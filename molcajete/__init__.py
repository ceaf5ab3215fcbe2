#!/usr/bin/env python3
"""
molcajete - plugin configuration setup for the host application
"""
__version__ = '0.1.0'
