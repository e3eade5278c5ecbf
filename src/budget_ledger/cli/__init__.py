"""
Command Line Interface Package

Command Structure:
- budget-ledger: Main entry point with utility commands (version, config)
- budget-ledger transfers: Transfers that balance a budget snapshot
- budget-ledger todo: Todo list of transfers and manual payments
"""
