"""
Tower Defense - a tick-driven tower defense game.
"""
