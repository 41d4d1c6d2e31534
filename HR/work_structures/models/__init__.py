# Tenant and structure models
from .organization import Organization, Department

# Jobs and employee job assignments
from .job import Job, EmployeeJobAssignment
