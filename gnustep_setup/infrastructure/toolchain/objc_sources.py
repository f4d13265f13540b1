EXPECTED_GREETING = "Hello, GhostBSD!"

HELLO_SOURCE = """\
#import <Foundation/Foundation.h>
int main(int argc, char *argv[]) {
    NSAutoreleasePool *pool = [[NSAutoreleasePool alloc] init];
    NSLog(@"Hello, GhostBSD!");
    [pool drain];
    return 0;
}
"""

GUI_SOURCE = """\
#import <AppKit/AppKit.h>
int main(int argc, char *argv[]) {
    NSAutoreleasePool *pool = [[NSAutoreleasePool alloc] init];
    [NSApplication sharedApplication];
    NSRunAlertPanel(@"Test", @"Hello from GNUstep GUI!", @"OK", nil, nil);
    [pool drain];
    return 0;
}
"""
