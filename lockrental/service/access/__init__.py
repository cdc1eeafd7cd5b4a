"""
Read and maintenance queries over the stored models.
"""
