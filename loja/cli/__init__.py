"""
CLI Layer - interactive menus and operation handlers
"""
