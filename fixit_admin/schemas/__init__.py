"""Pydantic schemas package.

Folder intent:
  common.py         — CamelModel / BackendRecord bases + HealthResponse
  account.py        — customers, vendors, repairers, repair companies
  transaction.py    — payment transactions
  content.py        — moderated content items + review form
  onboarding.py     — onboarding applications
  ecommerce.py      — orders, stores, products, reports
  invoice.py        — invoices
  erepair.py        — bookings, booking repairers, repairs, discovery, reports
  sos.py            — SOS requests + status form
  super_admin.py    — admin accounts + invite/edit forms
  review.py         — reviews, response form, summary
  advert.py         — advertisement banners + review form
  news.py           — news posts
  notification.py   — notifications + today/yesterday feed
  dashboard.py      — headline statistics
  auth.py           — login / register / forgot-password forms
  user.py           — profile + account settings forms
  account_usage.py  — login history + user activity rows
"""
