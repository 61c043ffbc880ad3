"""Lecture Hub: lecture scheduling, speaker invitations, attendance and feedback."""
