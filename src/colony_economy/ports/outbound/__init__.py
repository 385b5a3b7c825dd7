"""Outbound ports - capabilities consumed from collaborators"""
