"""
Copyright (c) 2025. All rights reserved.
"""

"""
Tests for the classification experiment stack: configs, data loading,
losses, optimizer and schedules, and the end-to-end experiment.
"""
