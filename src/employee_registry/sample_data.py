"""Demonstration employees for seeding an empty registry."""

from __future__ import annotations

from typing import Any, Dict, List

SAMPLE_EMPLOYEES: List[Dict[str, Any]] = [
    {
        "employeeId": "EMP001",
        "employeeCode": "EC001",
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@company.com",
        "phone": "+1-555-201-0123",
        "department": "IT",
        "position": "Software Developer",
        "salary": 75000,
        "dateOfJoining": "2023-01-15",
    },
    {
        "employeeId": "EMP002",
        "employeeCode": "EC002",
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@company.com",
        "phone": "+1-555-201-0124",
        "department": "HR",
        "position": "HR Manager",
        "salary": 65000,
        "dateOfJoining": "2023-02-20",
    },
    {
        "employeeId": "EMP003",
        "employeeCode": "EC003",
        "firstName": "Mike",
        "lastName": "Johnson",
        "email": "mike.johnson@company.com",
        "phone": "+1-555-201-0125",
        "department": "Finance",
        "position": "Financial Analyst",
        "salary": 55000,
        "dateOfJoining": "2023-03-10",
    },
    {
        "employeeId": "EMP004",
        "employeeCode": "EC004",
        "firstName": "Sarah",
        "lastName": "Williams",
        "email": "sarah.williams@company.com",
        "phone": "+1-555-201-0126",
        "department": "Marketing",
        "position": "Marketing Specialist",
        "salary": 50000,
        "dateOfJoining": "2023-04-05",
    },
    {
        "employeeId": "EMP005",
        "employeeCode": "EC005",
        "firstName": "Robert",
        "lastName": "Brown",
        "email": "robert.brown@company.com",
        "phone": "+1-555-201-0127",
        "department": "Sales",
        "position": "Sales Representative",
        "salary": 45000,
        "dateOfJoining": "2023-05-12",
    },
]
