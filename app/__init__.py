"""
FastAPI front end: upload Lydia statements, download ynab.csv.
"""
