from composer.domain.ai.patch import describe_changes


def normalize_proposal(proposal):
    return {
        "targetId": proposal.target_id,
        "current": proposal.current,
        "proposed": proposal.proposed,
        "changedKeys": proposal.changed_keys,
        "changes": describe_changes(proposal),
    }
