try:
    from cli.app import cli
except ModuleNotFoundError:
    # Fallback: 체크아웃에서 직접 실행할 때 프로젝트 루트를 sys.path에 추가
    import os
    import sys

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from cli.app import cli


def main():
    """aws-ranges CLI 엔트리포인트 (cli.app:cli 위임)"""
    cli(obj={})


if __name__ == "__main__":
    main()
