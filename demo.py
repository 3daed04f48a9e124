from targetedid import TargetedIDFilter, StaticSaltProvider, IdentifierDeriver

print("--- targetedid Live Demo ---")

# 1. Configure filter
salt_provider = StaticSaltProvider("demo-secret-salt")
targeted_filter = TargetedIDFilter(
    {"identifyingAttribute": "uid", "nameId": True},
    salt_provider=salt_provider,
)
print("[+] Filter configured on attribute 'uid' with NameID output")

# 2. Process a request for two different service providers
for sp in ("https://sp-one.example.org", "https://sp-two.example.org"):
    state = {
        "Attributes": {"uid": ["alice@example.org"]},
        "Source": {"metadata-set": "saml20-idp-hosted", "entityid": "https://idp.example.org"},
        "Destination": {"metadata-set": "saml20-sp-remote", "entityid": sp},
    }
    targeted_filter.process(state)
    name_id = state["Attributes"]["eduPersonTargetedID"][0]
    print(f"[+] {sp}: {name_id.value}")
    print(f"    - NameQualifier: {name_id.name_qualifier}")
    print(f"    - SPNameQualifier: {name_id.sp_name_qualifier}")

# 3. Verify a presented identifier
deriver = IdentifierDeriver(salt_provider)
uid = deriver.derive("alice@example.org")
print(f"[+] Verification: {deriver.verify(uid, 'alice@example.org')}")
print("--- Demo Complete ---")
