"""Core disk space logic for freespace.

Probing, reclamation, run orchestration and result reporting.
"""
