"""Student Records API: REST access to the student, orders, listofitem, agents and company tables."""
