# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: __init__.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: PowerShell environment bootstrap for Windows.
# -----------------------------------------------------------------------------
APP_NAME = "PowerShell Bootstrap"
VERSION = "1.0.0"
