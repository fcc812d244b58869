"""Subcommands for the staggerpanel CLI"""
