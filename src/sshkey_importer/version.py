"""Version information for sshkey-importer"""

__version__ = "0.1.0"
