"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- receipts: Receipt number generation (distributed lock + counter store)
- repair_requests: Repair request management
"""
