from src.service.service import get_catalog, quote_from_request_dict

catalog = get_catalog()

employee = {"id": "emp-001", "salary": 89000}

requests = {
    "voluntaryLife": {
        "familyMembersToCover": ["ee", "sp"],
        "coverageLevel": [
            {"role": "ee", "coverage": 200000},
            {"role": "sp", "coverage": 75000},
        ],
    },
    "longTermDisability": {"familyMembersToCover": ["ee"]},
    "commuter": {"benefit": "train"},
}

for product_key, options in requests.items():
    out = quote_from_request_dict(product_key, employee, options, catalog=catalog)
    print(f"[OK] {product_key:<20}: {out['quote']['price']:.2f} {out['currency']}")
