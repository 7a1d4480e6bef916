"""Presentation layer - Command line interface.

The CLI is thin: it parses arguments, runs one PasswordStore operation and
translates the Result into output and an exit status. No business logic.
"""
