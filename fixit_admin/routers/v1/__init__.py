"""v1 router package — all /api/v1/* endpoints live here.

Files:
  deps.py           — shared `?search=&tab=&page=&limit=` dependency
  directory.py      — customers, vendors, repairers, repair companies
  transactions.py, invoices.py, onboarding.py, content.py, ecommerce.py
  erepair.py        — bookings (+ repairer assignment), repairs, discovery, reports
  sos.py, super_admins.py, reviews.py, adverts.py, news.py
  notifications.py, dashboard.py
  auth.py           — public auth forms (+ logout, /me)
  profile.py        — account settings of the signed-in admin
  account_usage.py  — login history and user activity

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to fixit_admin/services/.
"""
