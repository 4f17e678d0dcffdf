"""
UCDrive Client - API Package

This package contains the remote API communication class.
"""

from .ucdrive_api import UCDriveAPI, FINISH_SENTINEL

__all__ = ['UCDriveAPI', 'FINISH_SENTINEL']
