"""Store back office: user onboarding and optimistic maintenance of users, addresses and contacts."""
