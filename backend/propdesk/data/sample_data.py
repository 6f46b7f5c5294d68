"""Static sample records served by the read-only repository."""

USERS = [
    {
        "id": "user-1",
        "name": "Sarah Johnson",
        "email": "sarah.johnson@propdesk.example",
        "phone": "(555) 123-4567",
        "role": "property_manager",
    },
    {
        "id": "user-2",
        "name": "Mike Chen",
        "email": "mike.chen@propdesk.example",
        "phone": "(555) 987-6543",
        "role": "property_manager",
    },
    {
        "id": "user-3",
        "name": "Elena Rodriguez",
        "email": "elena.rodriguez@propdesk.example",
        "phone": "(555) 456-7890",
        "role": "admin",
    },
]

PROPERTIES = [
    {
        "id": "1",
        "name": "Oakwood Apartments",
        "description": "Garden-style apartment community with a pool and on-site management.",
        "address": {
            "street": "1200 Oakwood Drive",
            "city": "Springfield",
            "state": "IL",
            "zip_code": "62704",
        },
        "coordinates": {"lat": 39.7817, "lng": -89.6501},
        "type": "apartment",
        "status": "active",
        "total_units": 24,
        "occupied_units": 20,
        "images": [
            "https://images.unsplash.com/photo-1545324418-cc1a3fa10c00?w=600&h=400&fit=crop",
            "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?w=600&h=400&fit=crop",
        ],
        "amenities": ["Pool", "Gym", "Parking", "In-unit Laundry"],
        "property_manager_id": "user-1",
        "year_built": 1998,
    },
    {
        "id": "2",
        "name": "Riverside Condos",
        "description": "Waterfront condominiums with balconies overlooking the river walk.",
        "address": {
            "street": "45 Water Street",
            "city": "Rivertown",
            "state": "OR",
            "zip_code": "97035",
        },
        "coordinates": {"lat": 45.4207, "lng": -122.6706},
        "type": "condo",
        "status": "active",
        "total_units": 12,
        "occupied_units": 11,
        "images": [
            "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?w=600&h=400&fit=crop",
        ],
        "amenities": ["Balcony", "Elevator", "Security", "Storage"],
        "property_manager_id": "user-2",
        "year_built": 2012,
    },
    {
        "id": "3",
        "name": "Downtown Lofts",
        "description": "Converted warehouse lofts with exposed brick and high ceilings.",
        "address": {
            "street": "300 Market Avenue",
            "city": "Metro City",
            "state": "NY",
            "zip_code": "10013",
        },
        "coordinates": {"lat": 40.7128, "lng": -74.006},
        "type": "apartment",
        "status": "maintenance",
        "total_units": 8,
        "occupied_units": 5,
        "images": [
            "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?w=600&h=400&fit=crop",
        ],
        "amenities": ["Exposed Brick", "High Ceilings", "Large Windows", "Bike Room"],
        "property_manager_id": "user-1",
        "year_built": 1925,
    },
    {
        "id": "4",
        "name": "Maple Street Townhomes",
        "description": "Two-story townhomes with private yards and attached garages.",
        "address": {
            "street": "18 Maple Street",
            "city": "Springfield",
            "state": "IL",
            "zip_code": "62711",
        },
        "coordinates": {"lat": 39.7684, "lng": -89.7034},
        "type": "townhouse",
        "status": "development",
        "total_units": 6,
        "occupied_units": 0,
        "images": [],
        "amenities": ["Private Yards", "Garage", "Playground"],
        "property_manager_id": "user-2",
        "year_built": None,
    },
    {
        "id": "5",
        "name": "Harbor Point Plaza",
        "description": "Retail and office suites at the harbor entrance.",
        "address": {
            "street": "9 Harbor Point Road",
            "city": "Bayview",
            "state": "FL",
            "zip_code": "33101",
        },
        "coordinates": {"lat": 25.7617, "lng": -80.1918},
        "type": "commercial",
        "status": "inactive",
        "total_units": 4,
        "occupied_units": 1,
        "images": [
            "https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?w=600&h=400&fit=crop",
        ],
        "amenities": ["Parking", "Security", "Package Receiving"],
        # Manager record has been removed; detail screen omits the section.
        "property_manager_id": "user-99",
        "year_built": 2005,
    },
]

UNITS = [
    {
        "id": "unit-101",
        "property_id": "1",
        "number": "101",
        "bedrooms": 1,
        "bathrooms": 1,
        "area": 650,
        "rent": 1150,
        "status": "occupied",
        "current_tenant_id": "tenant-1",
    },
    {
        "id": "unit-102",
        "property_id": "1",
        "number": "102",
        "bedrooms": 2,
        "bathrooms": 1,
        "area": 900,
        "rent": 1450,
        "status": "available",
    },
    {
        "id": "unit-201",
        "property_id": "2",
        "number": "2A",
        "bedrooms": 2,
        "bathrooms": 2,
        "area": 1100,
        "rent": 2100,
        "status": "occupied",
        "current_tenant_id": "tenant-2",
    },
    {
        "id": "unit-202",
        "property_id": "2",
        "number": "2B",
        "bedrooms": 3,
        "bathrooms": 2,
        "area": 1350,
        "rent": 2600,
        "status": "reserved",
    },
    {
        "id": "unit-301",
        "property_id": "3",
        "number": "L1",
        "bedrooms": 1,
        "bathrooms": 1.5,
        "area": 980,
        "rent": 2300,
        "status": "under_maintenance",
    },
    {
        "id": "unit-302",
        "property_id": "3",
        "number": "L2",
        "bedrooms": 2,
        "bathrooms": 2,
        "area": 1250,
        "rent": 2850,
        "status": "occupied",
        "current_tenant_id": "tenant-3",
    },
    {
        "id": "unit-401",
        "property_id": "4",
        "number": "T1",
        "bedrooms": 3,
        "bathrooms": 2.5,
        "area": 1600,
        "rent": 2400,
        "status": "available",
    },
]

TENANTS = [
    {
        "id": "tenant-1",
        "name": "John Smith",
        "email": "john.smith@email.example",
        "phone": "(555) 111-2222",
        "is_active": True,
        "current_unit_id": "unit-101",
        "move_in_date": "2023-03-01",
        "emergency_contact": {
            "name": "Mary Smith",
            "phone": "(555) 111-3333",
            "relationship": "Spouse",
        },
    },
    {
        "id": "tenant-2",
        "name": "Emily Davis",
        "email": "emily.davis@email.example",
        "phone": "(555) 222-3333",
        "is_active": True,
        "current_unit_id": "unit-201",
        "move_in_date": "2022-08-15",
    },
    {
        "id": "tenant-3",
        "name": "Carlos Martinez",
        "email": "carlos.m@email.example",
        "phone": "(555) 333-4444",
        "is_active": True,
        "current_unit_id": "unit-302",
        "move_in_date": "2024-01-10",
        "emergency_contact": {
            "name": "Ana Martinez",
            "phone": "(555) 333-5555",
            "relationship": "Sister",
        },
    },
    {
        "id": "tenant-4",
        "name": "Priya Patel",
        "email": "priya.patel@email.example",
        "phone": "(555) 444-5555",
        "is_active": False,
    },
    {
        "id": "tenant-5",
        "name": "David Kim",
        "email": "david.kim@email.example",
        "phone": "(555) 555-6666",
        "is_active": True,
        # Unit was decommissioned; detail screen omits the unit section.
        "current_unit_id": "unit-999",
        "move_in_date": "2021-06-01",
    },
]

VENDORS = [
    {
        "id": "vendor-1",
        "name": "QuickFix Plumbing",
        "email": "dispatch@quickfixplumbing.example",
        "phone": "(555) 700-1001",
        "specialties": ["plumbing"],
        "rating": 4.8,
        "total_jobs": 132,
        "is_active": True,
        "address": "77 Pipe Lane, Springfield, IL",
        "license_number": "PL-20391",
        "insurance_info": "General liability $2M",
    },
    {
        "id": "vendor-2",
        "name": "Bright Spark Electric",
        "email": "service@brightspark.example",
        "phone": "(555) 700-2002",
        "specialties": ["electrical", "hvac"],
        "rating": 4.5,
        "total_jobs": 87,
        "is_active": True,
        "license_number": "EL-55120",
    },
    {
        "id": "vendor-3",
        "name": "CoolAir Climate Control",
        "email": "hello@coolair.example",
        "phone": "(555) 700-3003",
        "specialties": ["hvac", "appliance"],
        "rating": 4.1,
        "total_jobs": 45,
        "is_active": True,
    },
    {
        "id": "vendor-4",
        "name": "Green Shield Pest Control",
        "email": "office@greenshield.example",
        "phone": "(555) 700-4004",
        "specialties": ["pest_control"],
        "rating": 3.9,
        "total_jobs": 28,
        "is_active": False,
    },
    {
        "id": "vendor-5",
        "name": "Sparkle Cleaning Co",
        "email": "book@sparkleclean.example",
        "phone": "(555) 700-5005",
        "specialties": ["cleaning", "other"],
        "rating": 4.6,
        "total_jobs": 210,
        "is_active": True,
    },
]

LEASES = [
    {
        "id": "lease-1",
        "tenant_id": "tenant-1",
        "unit_id": "unit-101",
        "property_id": "1",
        "start_date": "2023-03-01",
        "end_date": "2026-10-20",
        "rent": 1150,
        "deposit": 1150,
        "status": "active",
    },
    {
        "id": "lease-2",
        "tenant_id": "tenant-2",
        "unit_id": "unit-201",
        "property_id": "2",
        "start_date": "2022-08-15",
        "end_date": "2027-08-14",
        "rent": 2100,
        "deposit": 2100,
        "status": "active",
    },
    {
        "id": "lease-3",
        "tenant_id": "tenant-3",
        "unit_id": "unit-302",
        "property_id": "3",
        "start_date": "2024-01-10",
        "end_date": "2027-01-09",
        "rent": 2850,
        "deposit": 2850,
        "status": "active",
    },
    {
        "id": "lease-4",
        "tenant_id": "tenant-4",
        "unit_id": "unit-102",
        "property_id": "1",
        "start_date": "2022-06-01",
        "end_date": "2024-05-31",
        "rent": 1400,
        "deposit": 1400,
        "status": "expired",
    },
    {
        "id": "lease-5",
        "tenant_id": "tenant-5",
        "unit_id": "unit-999",
        "property_id": "9",
        "start_date": "2021-06-01",
        "end_date": "2027-05-31",
        "rent": 1900,
        "deposit": 1900,
        "status": "pending",
    },
    {
        # Tenant record has been removed; not counted on the tenants screen.
        "id": "lease-6",
        "tenant_id": "tenant-77",
        "unit_id": "unit-202",
        "property_id": "2",
        "start_date": "2025-10-15",
        "end_date": "2026-10-14",
        "rent": 2600,
        "deposit": 2600,
        "status": "active",
    },
]

PAYMENTS = [
    {
        "id": "payment-1",
        "tenant_id": "tenant-1",
        "lease_id": "lease-1",
        "amount": 1150,
        "type": "rent",
        "due_date": "2026-09-01",
        "paid_date": "2026-08-30",
        "status": "paid",
    },
    {
        "id": "payment-2",
        "tenant_id": "tenant-2",
        "lease_id": "lease-2",
        "amount": 2100,
        "type": "rent",
        "due_date": "2026-09-01",
        "status": "overdue",
    },
    {
        "id": "payment-3",
        "tenant_id": "tenant-2",
        "lease_id": "lease-2",
        "amount": 50,
        "type": "late_fee",
        "due_date": "2026-09-06",
        "status": "overdue",
    },
    {
        "id": "payment-4",
        "tenant_id": "tenant-3",
        "lease_id": "lease-3",
        "amount": 2850,
        "type": "rent",
        "due_date": "2026-10-01",
        "status": "pending",
    },
    {
        "id": "payment-5",
        "tenant_id": "tenant-77",
        "lease_id": "lease-6",
        "amount": 2600,
        "type": "rent",
        "due_date": "2026-09-01",
        "status": "overdue",
    },
]

MAINTENANCE_REQUESTS = [
    {
        "id": "request-1",
        "unit_id": "unit-101",
        "property_id": "1",
        "tenant_id": "tenant-1",
        "title": "Leaking kitchen faucet",
        "description": "Faucet drips constantly, even when fully closed.",
        "category": "plumbing",
        "priority": "high",
        "status": "in_progress",
        "assigned_vendor_id": "vendor-1",
        "estimated_cost": 180,
        "scheduled_date": "2026-09-22",
        "created_at": "2026-09-20",
    },
    {
        "id": "request-2",
        "unit_id": "unit-201",
        "property_id": "2",
        "tenant_id": "tenant-2",
        "title": "AC not cooling",
        "description": "Air conditioner runs but blows warm air.",
        "category": "hvac",
        "priority": "medium",
        "status": "assigned",
        "assigned_vendor_id": "vendor-2",
        "estimated_cost": 300,
        "created_at": "2026-09-25",
    },
    {
        "id": "request-3",
        "unit_id": "unit-302",
        "property_id": "3",
        "tenant_id": "tenant-3",
        "title": "Replace breaker panel",
        "description": "Breakers trip when two appliances run at once.",
        "category": "electrical",
        "priority": "high",
        "status": "completed",
        "assigned_vendor_id": "vendor-2",
        "estimated_cost": 600,
        "actual_cost": 640,
        "completed_date": "2026-08-15",
        "created_at": "2026-08-02",
    },
    {
        # Unit and property were decommissioned; the row omits their names.
        "id": "request-4",
        "unit_id": "unit-999",
        "property_id": "9",
        "tenant_id": "tenant-5",
        "title": "Furnace inspection",
        "category": "hvac",
        "priority": "low",
        "status": "completed",
        "assigned_vendor_id": "vendor-2",
        "actual_cost": 160,
        "completed_date": "2026-03-12",
        "created_at": "2026-03-01",
    },
    {
        "id": "request-5",
        "unit_id": "unit-102",
        "property_id": "1",
        "title": "Outlet sparking",
        "category": "electrical",
        "priority": "emergency",
        "status": "open",
        "assigned_vendor_id": "vendor-2",
        "created_at": "2026-09-28",
    },
    {
        "id": "request-6",
        "unit_id": "unit-401",
        "property_id": "4",
        "title": "Pre-listing deep clean",
        "category": "cleaning",
        "priority": "low",
        "status": "cancelled",
        "assigned_vendor_id": "vendor-5",
        "created_at": "2026-07-10",
    },
    {
        # Vendor record has been removed; no vendor screen shows this ticket.
        "id": "request-7",
        "unit_id": "unit-202",
        "property_id": "2",
        "title": "Gutter repair",
        "category": "structural",
        "priority": "medium",
        "status": "completed",
        "assigned_vendor_id": "vendor-99",
        "actual_cost": 420,
        "completed_date": "2026-06-30",
        "created_at": "2026-06-18",
    },
]
