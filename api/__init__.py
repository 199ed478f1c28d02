"""Remessa DARF API"""
