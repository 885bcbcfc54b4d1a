"""
API Routers - Organized endpoint handlers for the GreenCare API.

Each router handles a specific resource:
- participants: Registration lifecycle (register, update, cancel)
- payments: Stripe payment intents
- camps: Camp CRUD and popularity listing
- users: User profiles
- feedback: Camp reviews
"""
