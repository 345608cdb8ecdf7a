"""
Hosting client and configuration for the command framework.
"""

__version__ = "1.0.0"
__description__ = "Command framework core for discord.py-self bots"
