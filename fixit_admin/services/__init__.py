"""Services package — all business logic lives here, never in routers.

Files:
  backend_client.py  — httpx wrapper around the upstream REST backend
  collection.py      — list/detail base for one backend collection
  directory.py       — customers, vendors, repairers, repair companies
  transactions.py, invoices.py, onboarding.py, ecommerce.py, content.py
  erepair.py         — e-repair bookings, repairs, discovery, reports
  sos.py, super_admin.py, reviews.py, adverts.py, news.py
  notifications.py   — notification list + today/yesterday feed
  dashboard.py       — headline statistics
  auth.py            — register / login / password reset + local sessions
  profile.py         — profile page and account settings
  account_usage.py   — login history and user activity

Rule: routers call services, services call the backend client or
      repositories. No FastAPI imports in services.
"""
