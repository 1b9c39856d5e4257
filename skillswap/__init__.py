"""
SkillSwap - presentation and client-state service for a skill-bartering marketplace.
"""
