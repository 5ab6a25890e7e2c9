"""Services Layer — default business-logic collaborators behind core protocols."""
