"""Medication regimen scheduling and activity inference backend"""
