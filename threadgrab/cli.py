"""
threadgrab - Threads 视频链接提取工具

用法:
    threadgrab "https://www.threads.net/@user/post/ABC123"
    threadgrab "threads.net/@user/post/ABC123" --json
    threadgrab "链接" --verbose
"""

import sys
import json
import logging
import argparse

from .errors import ExtractionError
from .models import ExtractResult
from .pipeline import extract

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger("threadgrab")

# ─── 格式化输出 ─────────────────────────────────────────────────────────────────

def format_result(r: ExtractResult) -> str:
    lines = []
    lines.append(f"{'═'*60}")
    lines.append(f"  帖子: {r.post_id}")
    lines.append(f"  链接: {r.url}")
    lines.append(f"{'─'*60}")
    lines.append(f"  视频: {r.video_url}")
    lines.append(f"  封面: {r.thumbnail or '-'}")
    if r.strategy:
        lines.append(f"  来源: {r.strategy}")
    lines.append(f"{'═'*60}")
    return "\n".join(lines)

# ─── CLI ───────────────────────────────────────────────────────────────────────

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="threadgrab - Threads 视频链接提取工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  threadgrab "https://www.threads.net/@user/post/ABC123"
  threadgrab "threads.net/@user/post/ABC123" --json
""",
    )
    parser.add_argument("url", help="帖子链接 (threads.net / threads.com)")
    parser.add_argument("--json", "-j", action="store_true", help="JSON 格式输出")
    parser.add_argument("--verbose", "-v", action="store_true", help="详细日志")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("threadgrab").setLevel(logging.DEBUG)

    try:
        result = extract(args.url)
    except ExtractionError as e:
        if args.json:
            print(json.dumps(e.to_dict(), ensure_ascii=False, indent=2))
        print(f"❌ 错误: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_result(result))


if __name__ == "__main__":
    main()
