"""HomeSchool Tracker package.

Per-day subject completion tracking for home-schooled children, organized by
feature modules (roster, records, school_year, reports) with a thin Flask
controller layer over a store/repository core.
"""
