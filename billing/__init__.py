"""Billing data-access layer: invoices, customers, revenue and seeding."""
