class TEGFormat:
    TEG = "TEG" # source,target,timestamp
    DELETIONS = "DELETIONS" # source,target,startTime,endTime

    @staticmethod
    def list():
        return [
            TEGFormat.TEG,
            TEGFormat.DELETIONS,
        ]

    @staticmethod
    def num_fields(fmt: str) -> int:
        assert fmt in TEGFormat.list(), f"Unknown TEG format `{fmt}`; expected one of {TEGFormat.list()}."
        return 3 if fmt == TEGFormat.TEG else 4
