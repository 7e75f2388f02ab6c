"""ClubHive package.

Organized by feature modules (users, clubs, events, announcements, reports)
with a thin Flask controller layer over service/repository layers that read
and write a key-value collection store.
"""
