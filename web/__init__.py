"""HTTP interface"""
