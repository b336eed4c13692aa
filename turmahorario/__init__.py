"""
turmahorario – converts class/schedule PDF reports into course offerings.
"""
