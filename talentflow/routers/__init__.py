"""
API routers for TalentFlow.
"""
